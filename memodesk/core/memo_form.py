"""
Memo Form - Working state of the creation form and its submit action.

The form is the only way a memo enters the store: ``submit`` validates the
required fields, assigns an id, prepends the memo and clears the form.
"""

import logging
import uuid
from typing import Callable, List, Optional

from ..models import Memo, MemoCreate, MemoCreated, Notification
from ..storage import MemoStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("subject", "sender", "recipient")
REQUIRED_FIELD_LABELS = {"subject": "Subject", "sender": "From", "recipient": "To"}


class MemoValidationError(ValueError):
    """Raised when a required memo field is empty."""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = missing_fields
        super().__init__(
            "Missing required fields: "
            + ", ".join(REQUIRED_FIELD_LABELS[name] for name in missing_fields)
        )

    @property
    def notification(self) -> Notification:
        return Notification(
            title="Validation Error",
            description="Please fill in all required fields (Subject, From, To)",
            variant="destructive",
        )


def new_memo_id() -> str:
    return uuid.uuid4().hex


class MemoForm:
    """
    Owned working state of the memo creation form.

    Fields are addressed either by attribute name (``sender``) or by their
    form key (``from``).
    """

    def __init__(
        self,
        draft: Optional[MemoCreate] = None,
        id_factory: Callable[[], str] = new_memo_id,
    ):
        """
        Args:
            draft: Initial field values, empty when omitted
            id_factory: Produces the identifier of each submitted memo
        """
        self.draft = draft or MemoCreate()
        self.id_factory = id_factory

    @staticmethod
    def _field_name(field: str) -> str:
        for name, info in MemoCreate.model_fields.items():
            if field in (name, info.alias):
                return name
        raise KeyError(f"Unknown memo field: {field}")

    def update(self, field: str, value: str) -> None:
        """Change one field of the working state."""
        values = self.draft.model_dump()
        values[self._field_name(field)] = value
        self.draft = MemoCreate.model_validate(values)

    def reset(self) -> None:
        self.draft = MemoCreate()

    def missing_fields(self) -> List[str]:
        return [
            name for name in REQUIRED_FIELDS
            if not getattr(self.draft, name).strip()
        ]

    def validate(self) -> None:
        """
        Raises:
            MemoValidationError: If subject, from or to is empty
        """
        missing = self.missing_fields()
        if missing:
            raise MemoValidationError(missing)

    def submit(self, store: MemoStore) -> MemoCreated:
        """
        Validate the working state and add it to the store as a new memo.

        On validation failure the store and the working state are left
        untouched.

        Args:
            store: Memo store receiving the memo

        Returns:
            MemoCreated: The stored memo and the success notification

        Raises:
            MemoValidationError: If a required field is empty
        """
        try:
            self.validate()
        except MemoValidationError as e:
            logger.warning(f"Memo rejected: {e}")
            raise

        memo = Memo(id=self.id_factory(), **self.draft.model_dump())
        store.add(memo)
        self.reset()

        logger.info(
            f"Memo created: {memo.id}",
            extra={"extra_fields": {"memo_id": memo.id, "store_size": len(store)}}
        )
        return MemoCreated(
            memo=memo,
            notification=Notification(
                title="Success",
                description="Memo has been created successfully!",
            ),
        )
