"""Task collection: id allocation, ordering, removal, toggling, rendering."""

from cli_todo.models import Task
from cli_todo.tasklist import TaskList, today_stamp


def test_ids_sequential_from_empty():
    """Contract: N adds from empty yield ids 1..N in creation order."""
    tasks = TaskList()
    for i in range(5):
        tasks.add(f"task {i}")

    assert tasks.ids() == [1, 2, 3, 4, 5]


def test_add_defaults(fixed_today):
    tasks = TaskList()
    task = tasks.add("buy milk")

    assert task == Task(id=1, description="buy milk", completed=False, date_created=fixed_today)


def test_add_keeps_explicit_empty_date():
    tasks = TaskList()
    assert tasks.add("a", date_created="").date_created == ""


def test_add_keeps_description_verbatim():
    tasks = TaskList()
    assert tasks.add("").description == ""
    assert tasks.add("  padded  ").description == "  padded  "


def test_next_id_is_max_plus_one_over_current():
    tasks = TaskList([Task(3, "a"), Task(7, "b"), Task(5, "c")])
    assert tasks.add("d").id == 8


def test_next_id_after_deleting_middle_does_not_fill_gap():
    tasks = TaskList()
    for name in ("a", "b", "c"):
        tasks.add(name)
    tasks.remove_by_id(2)

    assert tasks.add("d").id == 4


def test_remove_keeps_order_of_others():
    """Contract: delete removes exactly one record, others unchanged and in order."""
    tasks = TaskList([Task(1, "a"), Task(2, "b"), Task(3, "c"), Task(4, "d")])
    removed = tasks.remove_by_id(2)

    assert removed == Task(2, "b")
    assert [t.description for t in tasks] == ["a", "c", "d"]
    assert tasks.ids() == [1, 3, 4]


def test_remove_missing_returns_none():
    tasks = TaskList([Task(1, "a")])
    assert tasks.remove_by_id(9) is None
    assert len(tasks) == 1


def test_toggle_flips_only_target():
    """Contract: toggle flips completed on one task and nothing else."""
    tasks = TaskList([Task(1, "a", False, "01/01/26"), Task(2, "b", True, "01/02/26")])
    toggled = tasks.toggle_by_text("1")

    assert toggled is not None and toggled.completed is True
    assert tasks.tasks == [Task(1, "a", True, "01/01/26"), Task(2, "b", True, "01/02/26")]


def test_toggle_twice_restores():
    tasks = TaskList([Task(1, "a"), Task(2, "b", True)])
    before = [Task(t.id, t.description, t.completed, t.date_created) for t in tasks]
    tasks.toggle_by_text("2")
    tasks.toggle_by_text("2")

    assert tasks.tasks == before


def test_toggle_matches_decimal_text_exactly():
    """Boundary: non-canonical numeric text does not match."""
    tasks = TaskList([Task(1, "a")])

    assert tasks.toggle_by_text("01") is None
    assert tasks.toggle_by_text(" 1") is None
    assert tasks.toggle_by_text("+1") is None
    assert tasks.tasks[0].completed is False


def test_render_layout():
    tasks = TaskList([Task(1, "buy milk", False, "10/19/26"), Task(12, "walk dog", True, "10/20/26")])
    lines = tasks.render().split("\n")

    assert lines[0] == ""
    assert lines[1] == f"{'ID':<5} {'Description':<70} {'Completed':<10} Date Created"
    assert lines[2] == "-" * 100
    assert lines[3] == f"{'1':<5} {'buy milk':<70} {'false':<10} 10/19/26"
    assert lines[4] == ""
    assert lines[5] == f"{'12':<5} {'walk dog':<70} {'true':<10} 10/20/26"
    assert lines[6] == ""
    assert len(lines) == 7


def test_render_colored_pads_before_styling(monkeypatch):
    import re

    import cli_todo.tasklist as mod
    from cli_todo import theme

    monkeypatch.setattr(theme, "_ENABLE", True)
    monkeypatch.setattr(theme, "RESET", "\033[0m")
    monkeypatch.setattr(mod, "BOLD", "\033[1m")
    monkeypatch.setattr(mod, "HEADER_COLOR", "\033[32m")
    monkeypatch.setattr(mod, "ROW_COLOR", "\033[36m")

    tasks = TaskList([Task(1, "buy milk", False, "10/19/26")])
    lines = tasks.render().split("\n")

    assert lines[1].startswith("\033[32m\033[1mID   \033[0m ")
    assert lines[3].startswith(f"\033[36m{'1':<5}\033[0m \033[36m{'buy milk':<70}\033[0m ")
    plain = [re.sub(r"\x1b\[[0-9;]*m", "", line) for line in lines]
    assert plain[1] == f"{'ID':<5} {'Description':<70} {'Completed':<10} Date Created"
    assert plain[2] == "-" * 100
    assert plain[3] == f"{'1':<5} {'buy milk':<70} {'false':<10} 10/19/26"


def test_render_does_not_truncate_long_description():
    long_text = "x" * 90
    tasks = TaskList([Task(1, long_text, False, "10/19/26")])

    assert f"1     {long_text} false      10/19/26" in tasks.render()


def test_render_empty_has_header_only():
    lines = TaskList().render().split("\n")
    assert len(lines) == 3


def test_today_stamp_format(monkeypatch):
    from datetime import date

    import cli_todo.tasklist as mod

    class FakeDate(date):
        @classmethod
        def today(cls):
            return cls(2024, 3, 7)

    monkeypatch.setattr(mod, "date", FakeDate)
    # fixed_today replaced the module attribute; call the original function
    assert today_stamp() == "03/07/24"
