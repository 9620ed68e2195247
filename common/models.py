"""Models shared by the server and the client."""
from enum import Enum


class Gender(str, Enum):
    """Gender selection; values are the wire literals."""
    MALE = "male"
    FEMALE = "female"
