# ============================================================================
# RescueTower - Interactive Menu Tests
#
# Purpose: Drive TowerMenu with scripted input and check the printed output
# Dependencies: pytest, RescueTower
# Usage: pytest tests/test_menu.py -v
# ============================================================================

from RescueTower.menu import TowerMenu
from RescueTower.tower import RescueTower


def _run(lines, tower=None):
    """Run the menu over scripted lines; returns (exit_code, output, tower)."""
    tower = tower or RescueTower()
    feed = iter(lines)
    printed = []

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    code = TowerMenu(tower, input_fn=fake_input, output_fn=printed.append).run()
    return code, "\n".join(printed), tower


def test_quit_immediately():
    code, out, _ = _run(["6"])
    assert code == 0
    assert "MISSION ENDED" in out


def test_eof_ends_session():
    code, _, _ = _run([])
    assert code == 0


def test_invalid_option():
    _, out, _ = _run(["9", "abc", "6"])
    assert out.count("Invalid option! Try again.") == 2


def test_register_component():
    _, out, tower = _run(["1", "Chip Central", "controle", "10", "6"])
    assert "[SUCCESS] Component 'Chip Central' registered! (1/20)" in out
    assert len(tower) == 1


def test_register_rejects_bad_priority():
    _, out, tower = _run(["1", "Chip", "controle", "11", "1", "Chip", "controle", "ten", "6"])
    assert "between 1 and 10" in out
    assert "whole number" in out
    assert len(tower) == 0


def test_register_when_full():
    tower = RescueTower()
    for i in range(20):
        tower.add_component(f"Part {i:02d}", "controle", 5)
    _, out, _ = _run(["1", "6"], tower)
    assert "Maximum capacity reached! (20 components)" in out


def test_list_empty():
    _, out, _ = _run(["2", "6"])
    assert "No components registered." in out


def test_sort_requires_components():
    _, out, _ = _run(["3", "6"])
    assert "No components registered!" in out


def test_load_sample_then_sort_and_search():
    _, out, tower = _run(["5", "3", "1", "4", "Chip Central", "6"])
    assert "[SUCCESS] 8 sample components loaded!" in out
    assert "Bubble Sort by NAME" in out
    assert "[FOUND]" in out
    assert "Escape tower ACTIVATED" in out
    assert tower.sorted_by == "name"


def test_sort_submenu_back_and_invalid():
    tower = RescueTower()
    tower.load_sample_data()
    _, out, _ = _run(["3", "4", "3", "7", "6"], tower)
    assert "Invalid option!" in out
    assert tower.history == []


def test_search_unsorted_shows_hint():
    tower = RescueTower()
    tower.load_sample_data()
    _, out, _ = _run(["4", "Nonexistent", "6"], tower)
    assert "[NOT FOUND]" in out
    assert "Sort by NAME first." in out


def test_reload_sample_requires_confirmation():
    tower = RescueTower()
    tower.add_component("Solo", "controle", 1)
    _, _, tower = _run(["5", "n", "6"], tower)
    assert len(tower) == 1
    _, _, tower = _run(["5", "y", "6"], tower)
    assert len(tower) == 8
