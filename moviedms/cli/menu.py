"""Menu — the interactive loop over a MovieStore.

Invariants:
    - Every action goes through the public MovieStore / Movie interface
    - Bad console input is re-asked, never raised
    - End of input (EOF) ends the loop like a confirmed exit

Design Decisions:
    - Explicit option table (no auto-discovery): menu text and dispatch stay in one place
    - Store and Settings injected: tests run the whole loop with scripted input
"""

import sys
from pathlib import Path

from moviedms.config import Settings, get_settings
from moviedms.core.domain_types import MIN_YEAR, MIN_RATING, MAX_RATING
from moviedms.core.enforce_fields import max_allowed_year
from moviedms.core.load_report import LoadReport
from moviedms.core.movie import Movie
from moviedms.cli.csv_source import find_default_csv, paste_buffer
from moviedms.cli.prompts import Prompter
from moviedms.services.movie_store import MovieStore

PASTE_KEYWORD = "PASTE"

_UPDATE_PROMPTS: tuple[tuple[str, str], ...] = (
    ("title", "New Title: "),
    ("director", "New Director: "),
    ("year", "New Year ({lo}..{hi}): "),
    ("duration", "New Duration minutes (>0): "),
    ("genre", "New Genre: "),
    ("rating", "New Rating (1..10): "),
)


class MovieMenu:
    """Menu-driven CLI: load, list, create, remove, update, average, exit."""

    def __init__(
        self,
        store: MovieStore | None = None,
        prompter: Prompter | None = None,
        settings: Settings | None = None,
        base_dir: Path | None = None,
    ):
        self.store = store if store is not None else MovieStore()
        self.prompter = prompter or Prompter()
        self.settings = settings or get_settings()
        self.base_dir = base_dir
        self.running = False
        self._actions = {
            "1": self.load_file,
            "2": self.show_all,
            "3": self.create_manual,
            "4": self.remove_by_id,
            "5": self.update_multiple_fields,
            "6": self.show_average,
            "7": self.exit_prompt,
        }

    # ─── Loop ────────────────────────────────────────────────────

    def run(self) -> None:
        self.running = True
        self.prompter.say("=== Movie Manager DMS ===")
        while self.running:
            self.print_menu()
            try:
                choice = self.prompter.ask("Choose (1-7): ")
                action = self._actions.get(choice)
                if action is None:
                    self.prompter.say("Invalid option. Try again.")
                else:
                    action()
            except EOFError:
                self.running = False
        self.prompter.say("Bye!")

    def print_menu(self) -> None:
        say = self.prompter.say
        say("")
        say("1) Load CSV file")
        say("2) Display all movies")
        say("3) Create (manual add)")
        say("4) Remove by MovieID")
        say("5) Update multiple fields")
        say("6) Custom: Average duration")
        say("7) Exit")

    # ─── 1: Load ─────────────────────────────────────────────────

    def load_file(self) -> None:
        """Load by path; ENTER auto-detects the default file, PASTE reads lines."""
        answer = self.prompter.ask(
            f"CSV path OR type {PASTE_KEYWORD} to paste lines "
            f"(press ENTER for default '{self.settings.default_csv_name}'): "
        )

        if not answer:
            found = find_default_csv(
                self.settings.default_csv_name,
                self.settings.csv_search_dirs,
                self.base_dir,
            )
            if found is None:
                self.prompter.say(
                    "No default CSV found. Please type a valid path or use PASTE mode."
                )
                return
            self.prompter.say(f"Auto-detected file: {found}")
            self.print_report(self.store.load_csv(found))
            return

        if answer.upper() == PASTE_KEYWORD:
            self.load_pasted()
            return

        self.print_report(self.store.load_csv(answer))

    def load_pasted(self) -> None:
        self.prompter.say(
            "Paste CSV lines now (id,title,director,year,duration,genre,rating)."
        )
        self.prompter.say("Press ENTER on an empty line to finish.")
        lines: list[str] = []
        while True:
            line = self.prompter.ask("")
            if not line:
                break
            lines.append(line)
        with paste_buffer(lines) as path:
            report = self.store.load_csv(path)
        self.print_report(report)

    def print_report(self, report: LoadReport) -> None:
        self.prompter.say(report.summary())
        if report.errors:
            self.prompter.say("Errors:")
            for error in report.errors:
                self.prompter.say(f" - {error}")

    # ─── 2: List ─────────────────────────────────────────────────

    def show_all(self) -> None:
        movies = self.store.all()
        if not movies:
            self.prompter.say("(no movies)")
            return
        for movie in movies:
            self.prompter.say(str(movie))

    # ─── 3: Create ───────────────────────────────────────────────

    def create_manual(self) -> None:
        ask = self.prompter
        upper = max_allowed_year()
        title = ask.ask_non_empty("Title: ")
        director = ask.ask_non_empty("Director: ")
        year = ask.ask_int(f"Year ({MIN_YEAR}..{upper}): ", MIN_YEAR, upper)
        duration = ask.ask_float(
            "Duration minutes (>0): ", sys.float_info.min, sys.float_info.max,
        )
        genre = ask.ask_non_empty("Genre: ")
        rating = ask.ask_float("Rating (1..10): ", MIN_RATING, MAX_RATING)

        movie_id = self.store.generate_id(title, year)
        movie = Movie(movie_id, title, director, year, duration, genre, rating)
        if self.store.add(movie):
            self.prompter.say(f"Added: {movie}")
        else:
            self.prompter.say("Add failed (validation or duplicate).")

    # ─── 4: Remove ───────────────────────────────────────────────

    def remove_by_id(self) -> None:
        movie_id = self.prompter.ask_non_empty("MovieID to remove: ")
        self.prompter.say("Deleted." if self.store.remove(movie_id) else "Not found.")

    # ─── 5: Update ───────────────────────────────────────────────

    def update_multiple_fields(self) -> None:
        """Ask for every field; blank answers are skipped."""
        movie_id = self.prompter.ask_non_empty("MovieID to update: ")
        if self.store.find_by_id(movie_id) is None:
            self.prompter.say("Not found.")
            return

        self.prompter.say(
            "Leave empty to skip a field. "
            "Available: title | director | year | duration | genre | rating"
        )
        fields: dict[str, str] = {}
        for key, prompt in _UPDATE_PROMPTS:
            answer = self.prompter.ask(prompt.format(lo=MIN_YEAR, hi=max_allowed_year()))
            if answer:
                fields[key] = answer

        if not self.store.update_fields(movie_id, fields):
            self.prompter.say("Update failed (validation error).")
            return
        self.prompter.say("Updated.")
        movie = self.store.find_by_id(movie_id)
        if movie is not None:
            self.prompter.say(str(movie))

    # ─── 6: Average ──────────────────────────────────────────────

    def show_average(self) -> None:
        avg = self.store.average_duration()
        if avg is None:
            self.prompter.say("No movies in the system.")
        else:
            self.prompter.say(f"Average duration: {avg:.2f} min")

    # ─── 7: Exit ─────────────────────────────────────────────────

    def exit_prompt(self) -> None:
        if self.prompter.confirm("Exit? (y/n): "):
            self.running = False
