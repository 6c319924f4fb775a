from .schema import QuestionRecord, BankDocument
from .loader import QuestionBank, load_bank, list_banks, bank_path

__all__ = [
    "QuestionRecord",
    "BankDocument",
    "QuestionBank",
    "load_bank",
    "list_banks",
    "bank_path",
]
