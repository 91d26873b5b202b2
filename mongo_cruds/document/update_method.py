from enum import StrEnum, auto


class UpdateMethod(StrEnum):
    """ Describes the method in which a document is written. Decides which timestamps get stamped. """
    INSERT = auto()
    UPDATE = auto()
