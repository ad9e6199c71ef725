import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

DEFAULT_MAX_COLS = 5

ID_ATTRIBUTE = "_operation.attributes.id"


class Operation(ABC):
    """
    Base of every request descriptor that can be logged.

    Subclasses provide a cheap fingerprint, used to group log lines by shape,
    and a fuller description capped at a number of listed columns.
    """

    @abstractmethod
    def fingerprint(self) -> Dict[str, Any]:
        ...

    @abstractmethod
    def describe(self, max_cols: int = DEFAULT_MAX_COLS) -> Dict[str, Any]:
        ...

    def to_json(self, max_cols: int = DEFAULT_MAX_COLS) -> str:
        return json.dumps(self.describe(max_cols))

    def __str__(self):
        return self.to_json()


class OperationWithAttributes(Operation, ABC):
    """ Operation carrying a bag of string keyed byte attributes """

    def __init__(self):
        self._attributes: Dict[str, bytes] = {}

    def set_attribute(self, name: str, value: Optional[bytes]):
        """ Sets an attribute, a None value removes it """
        if value is None:
            self._attributes.pop(name, None)
        else:
            self._attributes[name] = value
        return self

    def get_attribute(self, name: str) -> Optional[bytes]:
        return self._attributes.get(name)

    def get_attributes_map(self) -> Dict[str, bytes]:
        return dict(self._attributes)

    def attribute_size(self) -> int:
        return len(self._attributes)

    def set_id(self, operation_id: str):
        """ Tags the operation with an id that shows up in its description """
        return self.set_attribute(ID_ATTRIBUTE, operation_id.encode('utf-8'))

    def get_id(self) -> Optional[str]:
        attr = self.get_attribute(ID_ATTRIBUTE)
        return attr.decode('utf-8') if attr is not None else None
