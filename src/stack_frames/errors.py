from typing import Optional

from stack_frames.config import NOT_A_LIST_MESSAGE, NOT_A_TABLE_MESSAGE


class InvalidInputError(ValueError):
    """Entrée de stack_list qui ne respecte pas le contrat."""


class NotAListError(InvalidInputError):
    def __init__(self, message: str = NOT_A_LIST_MESSAGE):
        super().__init__(message)


class NotATableError(InvalidInputError):
    def __init__(self, index: Optional[int] = None, message: str = NOT_A_TABLE_MESSAGE):
        super().__init__(message)
        self.index = index
