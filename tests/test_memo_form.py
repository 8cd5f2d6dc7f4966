"""
Unit tests for the memo form, memo store and memo list.
"""

import pytest
from pydantic import ValidationError

from memodesk.core import MemoForm, MemoSelector, MemoValidationError, build_memo_list
from memodesk.models import Memo, MemoCreate
from memodesk.storage import MemoStore, get_memo_store, init_memo_store


class TestMemoForm:
    """Tests for MemoForm."""

    def test_submit_into_empty_store(self):
        store = MemoStore()
        form = MemoForm(draft=MemoCreate.model_validate(
            {"subject": "Q1 Review", "from": "Alice", "to": "Bob"}
        ))

        result = form.submit(store)

        assert len(store) == 1
        memo = store.snapshot()[0]
        assert memo is result.memo
        assert memo.subject == "Q1 Review"
        assert memo.sender == "Alice"
        assert memo.recipient == "Bob"
        assert memo.received_date == ""
        assert memo.id
        assert result.notification.title == "Success"
        assert result.notification.description == "Memo has been created successfully!"

    def test_missing_subject_is_rejected(self):
        store = MemoStore()
        form = MemoForm(draft=MemoCreate.model_validate({"from": "Alice", "to": "Bob"}))

        with pytest.raises(MemoValidationError) as exc_info:
            form.submit(store)

        assert len(store) == 0
        assert exc_info.value.missing_fields == ["subject"]
        notification = exc_info.value.notification
        assert notification.title == "Validation Error"
        assert notification.variant == "destructive"
        assert "Subject, From, To" in notification.description

    def test_failed_submit_keeps_working_state(self):
        form = MemoForm()
        form.update("from", "Alice")
        with pytest.raises(MemoValidationError):
            form.submit(MemoStore())
        assert form.draft.sender == "Alice"

    def test_whitespace_only_counts_as_missing(self):
        form = MemoForm(draft=MemoCreate(subject="  ", sender="Alice", recipient="\t"))
        assert form.missing_fields() == ["subject", "recipient"]

    def test_update_accepts_form_keys_and_attribute_names(self):
        form = MemoForm()
        form.update("subject", "Budget")
        form.update("from", "Finance")
        form.update("recipient", "Board")
        form.update("receivedDate", "2024-03-05")
        assert form.draft.subject == "Budget"
        assert form.draft.sender == "Finance"
        assert form.draft.recipient == "Board"
        assert form.draft.received_date == "2024-03-05"

    def test_update_unknown_field(self):
        with pytest.raises(KeyError):
            MemoForm().update("priority", "high")

    def test_update_rejects_malformed_date(self):
        with pytest.raises(ValidationError):
            MemoForm().update("receivedDate", "03/05/2024")

    def test_submit_resets_form(self):
        form = MemoForm(draft=MemoCreate(subject="S", sender="A", recipient="B", content="C"))
        form.submit(MemoStore())
        assert form.draft == MemoCreate()

    def test_newest_memo_first(self):
        store = MemoStore()
        ids = iter(["first", "second"])
        form = MemoForm(id_factory=lambda: next(ids))
        for subject in ("one", "two"):
            form.update("subject", subject)
            form.update("from", "A")
            form.update("to", "B")
            form.submit(store)
        assert [m.id for m in store.snapshot()] == ["second", "first"]

    def test_generated_ids_are_unique(self):
        store = MemoStore()
        form = MemoForm()
        for _ in range(50):
            form.draft = MemoCreate(subject="S", sender="A", recipient="B")
            form.submit(store)
        assert len({m.id for m in store.snapshot()}) == 50


class TestMemoStore:
    """Tests for MemoStore."""

    def test_snapshot_is_immutable_copy(self, make_memo):
        store = MemoStore()
        store.add(make_memo())
        snapshot = store.snapshot()
        store.add(make_memo())
        assert len(snapshot) == 1
        assert len(store) == 2

    def test_get(self, make_memo):
        store = MemoStore()
        memo = store.add(make_memo(id="abc"))
        assert store.get("abc") is memo
        assert store.get("missing") is None

    def test_memo_is_frozen(self, make_memo):
        memo = make_memo()
        with pytest.raises(ValidationError):
            memo.subject = "changed"

    def test_global_store(self):
        store = init_memo_store()
        assert get_memo_store() is store
        assert init_memo_store() is not store


class TestMemoList:
    """Tests for the memo list view."""

    def test_empty_state(self):
        view = build_memo_list([])
        assert view.count == 0
        assert view.memos == []
        assert view.empty_state.title == "No Memos Yet"

    def test_entries_in_store_order(self, make_memo):
        store = MemoStore()
        first = store.add(make_memo(subject="older"))
        second = store.add(make_memo(subject="newer", received_date="2024-03-05"))

        view = build_memo_list(store.snapshot())

        assert view.empty_state is None
        assert [m.id for m in view.memos] == [second.id, first.id]
        assert view.memos[0].display_date == "3/5/2024"
        assert view.memos[1].display_date is None

    def test_count_label(self, make_memo):
        assert build_memo_list([make_memo()]).label == "1 memo"
        assert build_memo_list([make_memo(), make_memo()]).label == "2 memos"

    def test_selection_callback(self, make_memo):
        store = MemoStore()
        memo = store.add(make_memo(id="picked"))
        selected = []
        selector = MemoSelector(store, on_select=selected.append)

        assert selector.select("picked") is memo
        assert selector.select("unknown") is None
        assert selected == [memo]

    def test_selection_without_callback(self, make_memo):
        store = MemoStore()
        store.add(make_memo(id="picked"))
        assert MemoSelector(store).select("picked").id == "picked"


def test_memo_json_uses_form_keys(make_memo):
    memo = make_memo(received_date="2024-03-05", data_dispatcher="Desk")
    data = memo.model_dump(by_alias=True)
    assert data["from"] == "Alice"
    assert data["to"] == "Bob"
    assert data["receivedDate"] == "2024-03-05"
    assert data["dataDispatcher"] == "Desk"
    assert isinstance(Memo.model_validate(data), Memo)
