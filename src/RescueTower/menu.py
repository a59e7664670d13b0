# ============================================================================
# RescueTower - Interactive Menu
#
# Purpose: Text menu for building a tower catalog, sorting it and searching it
# Inputs: Lines from input_fn
# Outputs: Text through output_fn
# Dependencies: tower, reporting.console, errors
# Usage: TowerMenu(RescueTower(config)).run()
#
# Changelog:
#   2026-03-06: Initial menu (register, list, sort, search, sample data, quit)
#   2026-03-08: input/output made injectable; EOF on input ends the session
# ============================================================================

from typing import Callable, Optional

from RescueTower.errors import RescueTowerError
from RescueTower.logging_utils import get_logger
from RescueTower.reporting.console import (
    format_component_table,
    format_search_outcome,
    format_sort_outcome,
)
from RescueTower.tower import RescueTower

logger = get_logger(__name__)

MAIN_MENU = """
╔════════════════════════════════════════╗
║   RESCUE TOWER - FINAL MISSION         ║
╠════════════════════════════════════════╣
║ 1. Register component                  ║
║ 2. List components                     ║
║ 3. Sort components                     ║
║ 4. Binary search (key component)       ║
║ 5. Load sample data                    ║
║ 6. Quit mission                        ║
╚════════════════════════════════════════╝"""

SORT_MENU = """
╔════════════════════════════════════════╗
║     ORGANIZATION STRATEGIES            ║
╠════════════════════════════════════════╣
║ 1. Bubble Sort (by Name)               ║
║ 2. Insertion Sort (by Category)        ║
║ 3. Selection Sort (by Priority)        ║
║ 4. Back to main menu                   ║
╚════════════════════════════════════════╝"""

SORT_CHOICES = {1: "name", 2: "category", 3: "priority"}


class TowerMenu:
    """Interactive loop over one RescueTower session."""

    def __init__(
        self,
        tower: RescueTower,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.tower = tower
        self._input = input_fn
        self._out = output_fn

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).rstrip("\r\n")

    def _ask_int(self, prompt: str) -> Optional[int]:
        raw = self._ask(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def _show_catalog(self) -> None:
        self._out(format_component_table(self.tower.components, self.tower.catalog.capacity))

    def register(self) -> None:
        catalog = self.tower.catalog
        if catalog.is_full():
            self._out(f"\n[WARNING] Maximum capacity reached! ({catalog.capacity} components)")
            return

        self._out("\n=== REGISTER COMPONENT ===")
        name = self._ask("Component name: ")
        category = self._ask("Category (controle/suporte/propulsao/estrutura): ")
        priority = self._ask_int(
            f"Priority ({catalog.config.min_priority}-{catalog.config.max_priority}): "
        )
        if priority is None:
            self._out("\n[ERROR] Priority must be a whole number!")
            return

        try:
            self.tower.add_component(name, category, priority)
        except RescueTowerError as e:
            self._out(f"\n[ERROR] {e.message}")
            return
        self._out(f"\n[SUCCESS] Component '{name}' registered! ({len(catalog)}/{catalog.capacity})")

    def sort(self) -> None:
        if len(self.tower) == 0:
            self._out("\n[WARNING] No components registered!")
            return

        self._out(SORT_MENU)
        choice = self._ask_int("Choose a strategy: ")
        if choice == 4:
            return
        key = SORT_CHOICES.get(choice) if choice is not None else None
        if key is None:
            self._out("\n[ERROR] Invalid option!")
            return

        outcome = self.tower.sort(key)
        self._out("")
        self._out(format_sort_outcome(outcome))
        self._show_catalog()

    def search(self) -> None:
        if len(self.tower) == 0:
            self._out("\n[WARNING] No components registered!")
            return

        self._out("\n=== BINARY SEARCH ===")
        self._out("ATTENTION: the list must be sorted by NAME!")
        name = self._ask("Key component name: ")
        try:
            outcome = self.tower.search(name)
        except RescueTowerError as e:
            self._out(f"\n[ERROR] {e}")
            return
        self._out("")
        self._out(format_search_outcome(outcome))
        if outcome.found:
            self._out("\n🚀 Escape tower ACTIVATED! Prepare for extraction!")

    def load_sample(self) -> None:
        if len(self.tower) > 0:
            self._out("\n[WARNING] Components are already registered!")
            answer = self._ask("Clear them and load sample data? (y/n): ").strip().lower()
            if answer not in ("y", "yes"):
                return
        count = self.tower.load_sample_data()
        self._out(f"\n[SUCCESS] {count} sample components loaded!")
        self._show_catalog()

    def run(self) -> int:
        """Loop until the user quits or input ends. Returns an exit code."""
        self._out("╔════════════════════════════════════════╗")
        self._out("║     FREE FIRE - RESCUE TOWER           ║")
        self._out("║  The safe zone is closing in!          ║")
        self._out("╚════════════════════════════════════════╝")

        actions = {
            1: self.register,
            2: self._show_catalog,
            3: self.sort,
            4: self.search,
            5: self.load_sample,
        }
        while True:
            self._out(MAIN_MENU)
            try:
                choice = self._ask_int("Choose an option: ")
                if choice == 6:
                    self._out("\nMISSION ENDED! Good luck in the next battle!\n")
                    return 0
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self._out("\n[ERROR] Invalid option! Try again.")
                    continue
                action()
            except EOFError:
                logger.debug("Input closed; leaving menu")
                self._out("")
                return 0
