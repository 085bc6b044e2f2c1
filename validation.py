import re

MSG_NAME_EMPTY = "Product name cannot be empty"
MSG_NAME_SEARCH = "Please enter product name to search"
MSG_NAME_DELETE = "Please enter product name to delete"
MSG_QUANTITY_INVALID = "Please enter a valid quantity"
MSG_QUANTITY_NOT_POSITIVE = "Quantity must be greater than 0"

# Quantities are stored in a 32-bit INT column
MAX_QUANTITY = 2 ** 31 - 1
MIN_QUANTITY = -2 ** 31

_INTEGER_RE = re.compile(r'[+-]?[0-9]+')


class ValidationError(ValueError):
    """Raised when form input cannot be used; the message is shown to the user as is."""


def validate_product_name(text, message=MSG_NAME_EMPTY):
    if text is None or not text.strip():
        raise ValidationError(message)
    return text


def parse_quantity(text):
    """
    Turn the quantity field into a positive int.
    Only plain digits with an optional sign are accepted, no spaces or underscores.
    """
    if text is None or not _INTEGER_RE.fullmatch(text):
        raise ValidationError(MSG_QUANTITY_INVALID)
    quantity = int(text)
    if quantity < MIN_QUANTITY or quantity > MAX_QUANTITY:
        raise ValidationError(MSG_QUANTITY_INVALID)
    if quantity <= 0:
        raise ValidationError(MSG_QUANTITY_NOT_POSITIVE)
    return quantity
