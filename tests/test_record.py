from dataclasses import dataclass
from types import SimpleNamespace

import pytest
from pydantic import BaseModel

from changers import object_changer, set_to_changer
from fakes import Todo, increment, todo_changer


@dataclass(slots=True)
class Point:
    x: int
    y: int = 0


class Settings(BaseModel):
    retries: int = 1
    timeout: int = 30


class TestDictRecord:
    def test_to_returns_replacement(self) -> None:
        replacement = {"a": 1}
        assert object_changer(increment)({}, ("to", replacement)) is replacement

    def test_set_assigns_property(self) -> None:
        state = {"a": 1}
        result = object_changer(increment)(state, ("set", "b", 3))
        assert result is state
        assert state == {"a": 1, "b": 3}

    def test_del_removes_property(self) -> None:
        state = {"a": 1, "b": 2}
        object_changer(increment)(state, ("del", "a"))
        assert state == {"b": 2}

    def test_del_ignores_none_and_missing(self) -> None:
        state = {"a": None}
        changer = object_changer(increment)
        changer(state, ("del", "a"))
        changer(state, ("del", "missing"))
        assert state == {"a": None}

    def test_chg_folds_over_property(self) -> None:
        state = {"a": 1, "b": 2}
        object_changer(increment)(state, ("chg", "b", "inc", "inc"))
        assert state == {"a": 1, "b": 4}

    def test_chg_missing_property_is_noop(self) -> None:
        state = {"a": 1}
        object_changer(increment)(state, ("chg", "b", "inc"))
        assert state == {"a": 1}

    def test_all_mutates_in_place(self) -> None:
        state = {"a": 1, "b": 2}
        result = object_changer(increment)(state, ("all", "inc"))
        assert result is state
        assert state == {"a": 2, "b": 3}

    def test_all_without_changes_returns_same_record(self) -> None:
        state = {"a": 1}
        assert object_changer(increment)(state, ("all",)) is state
        assert state == {"a": 1}

    def test_all_visits_keys_present_at_start(self) -> None:
        state: dict = {"a": 1, "b": 2}

        def grow(value: int, change: str) -> int:
            state["extra"] = 0
            return value + 1

        object_changer(grow)(state, ("all", "grow"))
        assert state == {"a": 2, "b": 3, "extra": 0}

    def test_all_skips_keys_removed_midway(self) -> None:
        state: dict = {"a": 1, "b": 2}

        def shrink(value: int, change: str) -> int:
            state.pop("b", None)
            return value + 1

        object_changer(shrink)(state, ("all", "shrink"))
        assert state == {"a": 2}


class TestAttributeRecord:
    def test_del_defaulted_field_twice(self) -> None:
        todo = Todo(id=1, title="a", done=True)
        changer = todo_changer()

        changer(todo, ("del", "done"))
        changer(todo, ("del", "done"))

        assert vars(todo) == {"id": 1, "title": "a"}

    def test_chg_after_del_does_not_restore_default(self) -> None:
        todo = Todo(id=1, title="a", done=True)
        changer = todo_changer()

        changer(todo, ("del", "done"))
        changer(todo, ("chg", "done", ("tgl",)))

        assert "done" not in vars(todo)

    def test_slotted_dataclass_del_then_chg(self) -> None:
        point = Point(x=1, y=2)
        changer = object_changer(increment)

        changer(point, ("del", "y"))
        changer(point, ("del", "y"))
        changer(point, ("chg", "y", "inc"))
        changer(point, ("all", "inc"))

        assert point.x == 2
        assert not hasattr(point, "y")

    def test_dataclass_properties(self) -> None:
        todo = Todo(id=1, title="write")
        changer = todo_changer()

        changer(todo, ("chg", "done", ("tgl",)))
        assert todo.done is True

        changer(todo, ("set", "title", "ship"))
        assert todo.title == "ship"

    def test_false_is_not_treated_as_absent(self) -> None:
        todo = Todo(id=1, title="write", done=False)
        todo_changer()(todo, ("chg", "done", ("tgl",)))
        assert todo.done is True

    def test_namespace_del_and_all(self) -> None:
        record = SimpleNamespace(a=1, b=2)
        changer = object_changer(increment)

        changer(record, ("del", "a"))
        assert not hasattr(record, "a")

        changer(record, ("all", "inc"))
        assert vars(record) == {"b": 3}

    def test_namespace_set_creates_attribute(self) -> None:
        record = SimpleNamespace()
        object_changer(increment)(record, ("set", "a", 1))
        assert record.a == 1

    def test_pydantic_model(self) -> None:
        settings = Settings()
        changer = object_changer(set_to_changer())

        changer(settings, ("chg", "retries", ("to", 3)))
        changer(settings, ("all", ("to", 5)))

        assert settings.retries == 5
        assert settings.timeout == 5

    def test_unenumerable_record(self) -> None:
        with pytest.raises(TypeError):
            object_changer(increment)(42, ("all", "inc"))
