"""User-facing messages in the supported output languages."""

from enum import Enum


class Language(Enum):
    """Language used for the messages the system prints."""

    ENGLISH = "en"
    PORTUGUESE = "pt"


class Message(Enum):
    """A message, holding its English and Portuguese wording."""

    TOO_MANY_VACCINES = ("too many vaccines", "demasiadas vacinas")
    DUPLICATE_BATCH = ("duplicate batch number", "número de lote duplicado")
    INVALID_BATCH = ("invalid batch", "lote inválido")
    INVALID_NAME = ("invalid name", "nome inválido")
    INVALID_INPUT = ("invalid input", "input inválido")
    NO_SUCH_VACCINE = ("no such vaccine", "vacina inexistente")
    INVALID_DATE = ("invalid date", "data inválida")
    NO_STOCK = ("no stock", "esgotado")
    INVALID_QUANTITY = ("invalid quantity", "quantidade inválida")
    NO_MEMORY = ("no memory", "sem memória")
    ALREADY_VACCINATED = ("already vaccinated", "já vacinado")
    NO_SUCH_USER = ("no such user", "utente inexistente")
    NO_SUCH_BATCH = ("no such batch", "lote inexistente")

    def text(self, language):
        """Return the wording of this message in the given language."""
        english, portuguese = self.value
        return portuguese if language is Language.PORTUGUESE else english