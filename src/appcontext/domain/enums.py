from enum import Enum


class MappingTypeName(str, Enum):
    """Names of the bundled mapping type strategies.

    Attributes:
        SINGLETON: Instantiates the mapping's ``class`` with its resolved arguments.
        FACTORY: Calls the mapping's ``factory`` with its resolved arguments.
        VALUE: Returns the mapping's ``value`` as is.
    """

    SINGLETON = "singleton"
    FACTORY = "factory"
    VALUE = "value"

    def __str__(self) -> str:
        return self.value


DEFAULT_MAPPING_TYPE = MappingTypeName.SINGLETON.value
