from enum import Enum

class Role(str, Enum):
    READER = "Reader"
    EDITOR = "Editor"
    ADMIN = "Admin"
