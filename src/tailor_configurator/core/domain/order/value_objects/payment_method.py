from enum import StrEnum


class PaymentMethod(StrEnum):
    COD = "cod"
    BANK_TRANSFER = "bank_transfer"
    CARD = "card"
