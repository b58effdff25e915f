"""Resources keyed by a two-part composite identifier.

Many platform objects are addressed by a pair of values, e.g. a group and one
of its members. ``PairID`` stores such a pair as a single ``left|right``
identifier and binds it to create/read/delete callbacks that only ever see
the decoded halves:

    pair = PairID("group_id", "member_id")
    resource = pair.bind_resource(BindResource(
        create=lambda group, member, client: client.post(...),
        read=lambda group, member, client: client.get(...),
        delete=lambda group, member, client: client.post(...),
    ))

A read callback that raises ``NotFoundError`` removes the resource from
state instead of failing.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from .platform.exceptions import is_not_found
from .schema import FieldSchema, FieldType, Resource, ResourceData
from .validators import as_id_part, join_pair_id, require_pair_values, split_pair_id

PairCallback = Callable[[str, str, Any], None]
SchemaCustomizer = Callable[[Dict[str, FieldSchema]], Dict[str, FieldSchema]]

logger = logging.getLogger(__name__)


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class CallbackOutcome:
    """Normalised result of one lifecycle callback invocation."""
    kind: OutcomeKind
    error: Optional[BaseException] = None

    @classmethod
    def of(cls, callback: PairCallback, left: str, right: str, client: Any) -> "CallbackOutcome":
        try:
            callback(left, right, client)
        except Exception as e:
            kind = OutcomeKind.NOT_FOUND if is_not_found(e) else OutcomeKind.ERROR
            return cls(kind, e)
        return cls(OutcomeKind.SUCCESS)

    def raise_error(self) -> None:
        """Re-raise the callback's exception unchanged, if any."""
        if self.error is not None:
            raise self.error


@dataclass
class BindResource:
    """Remote calls for a pair-keyed resource; each one is optional."""
    create: Optional[PairCallback] = None
    read: Optional[PairCallback] = None
    delete: Optional[PairCallback] = None


class PairID:
    """Binds two named fields to a ``left|right`` resource identifier."""

    def __init__(self, left: str, right: str):
        self.left = left
        self.right = right
        self._schema: Dict[str, FieldSchema] = {
            left: FieldSchema(FieldType.STRING),
            right: FieldSchema(FieldType.STRING),
        }

    def schema(self, customize: SchemaCustomizer) -> "PairID":
        """Adjust the field schema before binding, e.g. to make a field numeric."""
        current = {name: spec.copy() for name, spec in self._schema.items()}
        self._schema = customize(current)
        return self

    def field_schema(self) -> Dict[str, FieldSchema]:
        return {name: spec.copy() for name, spec in self._schema.items()}

    def pack(self, data: ResourceData) -> None:
        """Encode the current field values into the identifier."""
        data.set_id(join_pair_id(as_id_part(data.get(self.left)), as_id_part(data.get(self.right))))

    def pending(self, data: ResourceData) -> Tuple[str, str]:
        """Return the pair held in the fields of a pending resource.

        Raises:
            EmptyFieldError: If either half is empty
        """
        left = as_id_part(data.get(self.left))
        right = as_id_part(data.get(self.right))
        require_pair_values(left, right, self.left, self.right)
        return left, right

    def unpack(self, data: ResourceData) -> Tuple[str, str]:
        """Decode the identifier of ``data`` and write the halves into its fields.

        Both halves are coerced to their declared types before anything is
        written; on failure the state is marked absent.

        Raises:
            InvalidIDError: If the identifier has no separator
            EmptyFieldError: If either half is empty
            ValueError: If a half does not fit its field type
        """
        try:
            left, right = split_pair_id(data.id, self.left, self.right)
            left_value = data.schema[self.left].type.coerce(left)
            right_value = data.schema[self.right].type.coerce(right)
        except ValueError as e:
            logger.debug(f"Cannot decode identifier {data.id!r}: {e}")
            data.mark_absent()
            raise
        data.set(self.left, left_value)
        data.set(self.right, right_value)
        return left, right

    def bind_resource(self, bind: BindResource) -> Resource:
        """Build a resource whose lifecycle delegates to ``bind``."""

        def create(data: ResourceData, client: Any) -> None:
            left, right = self.pending(data)
            outcome = CallbackOutcome.of(bind.create, left, right, client)
            if outcome.kind is not OutcomeKind.SUCCESS:
                data.mark_absent()
                outcome.raise_error()
            self.pack(data)

        def read(data: ResourceData, client: Any) -> None:
            left, right = self.unpack(data)
            outcome = CallbackOutcome.of(bind.read, left, right, client)
            if outcome.kind is OutcomeKind.NOT_FOUND:
                logger.info(f"Removing {data.id} from state: {outcome.error}")
                data.mark_absent()
                return
            outcome.raise_error()

        def delete(data: ResourceData, client: Any) -> None:
            left, right = self.unpack(data)
            CallbackOutcome.of(bind.delete, left, right, client).raise_error()

        return Resource(
            schema=self.field_schema(),
            create_func=create if bind.create else None,
            read_func=read if bind.read else None,
            delete_func=delete if bind.delete else None,
        )
