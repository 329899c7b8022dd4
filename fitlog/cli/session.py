"""
Interactive menu loop. Reads choices from the console, dispatches to the log store
and aggregator, and prints their results. Runs next to the reminder ticker and stops it on exit.
"""
from __future__ import annotations

import asyncio
import logging

from fitlog.cli.prompts import Reader, parse_int, parse_int_or_zero, read_int, safe_read
from fitlog.config import settings
from fitlog.core.errors import FitlogError, MissingInput
from fitlog.schemas.workout import WorkoutFields, WorkoutKind, details_for
from fitlog.services import aggregator
from fitlog.services.log_store import LogStore
from fitlog.services.reminder import ReminderTicker

logger = logging.getLogger(__name__)

MENU = "\n".join([
    "",
    "—— Daily Fitness Log Manager ——",
    "1. Add Outdoor Workout",
    "2. Add Gym Workout",
    "3. View All Logs",
    "4. Update Log",
    "5. Delete Log",
    "6. Show Weekly Summary",
    "7. Set & Track Fitness Goals",
    "8. Exit",
])
CHOICE_PROMPT = "Enter your Choice: "
EXIT_CHOICE = 8

DETAIL_PROMPTS = {
    WorkoutKind.OUTDOOR: "Weather Condition: ",
    WorkoutKind.GYM: "Gym Equipment Used: ",
}
UPDATE_DETAIL_PROMPTS = {
    WorkoutKind.OUTDOOR: "New Weather Condition: ",
    WorkoutKind.GYM: "New Gym Equipment: ",
}
UPDATE_PROMPTS = ("New Activity Name: ", "New Category: ", "New Duration: ", "New Calories: ")


def add_prompts() -> tuple[str, str, str, str]:
    return (
        "Activity Name: ",
        f"Category ({settings.category_hint}): ",
        "Duration (minutes): ",
        "Calories burned: ",
    )


class SessionController:
    def __init__(
        self,
        store: LogStore | None = None,
        ticker: ReminderTicker | None = None,
        reader: Reader = input,
    ):
        self.store = store if store is not None else LogStore()
        self.ticker = ticker if ticker is not None else ReminderTicker()
        self._reader = reader
        self._handlers = {
            1: lambda: self.add_workout(WorkoutKind.OUTDOOR),
            2: lambda: self.add_workout(WorkoutKind.GYM),
            3: self.show_logs,
            4: self.update_workout,
            5: self.delete_workout,
            6: self.show_weekly_summary,
            7: self.set_and_track_goal,
        }

    async def _read(self, prompt: str) -> str:
        # input() blocks, keep it off the loop so the reminder keeps ticking
        return await asyncio.to_thread(safe_read, prompt, self._reader)

    async def _read_int(self, prompt: str) -> int:
        return await asyncio.to_thread(read_int, prompt, self._reader)

    async def run(self) -> int:
        """Run until the user exits (returns 0) or input ends on the menu prompt (returns 1)."""
        await self.ticker.start()
        try:
            while True:
                print(MENU)
                try:
                    raw = await self._read(CHOICE_PROMPT)
                except MissingInput:
                    logger.warning("Input closed at menu prompt, ending session")
                    return 1
                try:
                    choice = parse_int(raw)
                except FitlogError:
                    choice = None
                if choice == EXIT_CHOICE:
                    print("Exit. Stay healthy......")
                    return 0
                handler = self._handlers.get(choice)
                if handler is None:
                    print("Invalid Choice.")
                    continue
                await handler()
        finally:
            await self.ticker.stop()

    async def _read_fields(self, prompts: tuple[str, str, str, str]) -> WorkoutFields:
        name_prompt, category_prompt, duration_prompt, calories_prompt = prompts
        return WorkoutFields(
            activity_name=await self._read(name_prompt),
            category=await self._read(category_prompt),
            duration=await self._read_int(duration_prompt),
            calories=await self._read_int(calories_prompt),
        )

    async def add_workout(self, kind: WorkoutKind) -> None:
        try:
            fields = await self._read_fields(add_prompts())
            detail = await self._read(DETAIL_PROMPTS[kind])
        except FitlogError as e:
            print(f"Error: {e}")
            return
        self.store.add_record(fields, details_for(kind, detail))
        print("Workout added.")

    async def show_logs(self) -> None:
        listing = self.store.list_records()
        if listing is None:
            print("No logs.")
            return
        for line in listing:
            print(line)

    async def update_workout(self) -> None:
        try:
            record_id = await self._read_int("Enter log ID to update: ")
        except FitlogError as e:
            print(f"Error: {e}")
            return
        record = self.store.find_by_id(record_id)
        if record is None:
            print("Log not found.")
            return
        print(f"Updating log ID {record_id}")
        try:
            fields = await self._read_fields(UPDATE_PROMPTS)
            detail = await self._read(UPDATE_DETAIL_PROMPTS[record.kind])
        except FitlogError as e:
            print(f"Update failed: {e}")
            return
        self.store.update_by_id(record_id, fields, detail)
        print("Updated successfully.")

    async def delete_workout(self) -> None:
        try:
            record_id = await self._read_int("Enter log ID to delete: ")
        except FitlogError as e:
            print(f"Error: {e}")
            return
        print("Deleted successfully." if self.store.delete_by_id(record_id) else "Log not found.")

    async def show_weekly_summary(self) -> None:
        summary = aggregator.weekly_summary(self.store)
        print(f"Weekly Summary: {summary.activities} activities, {summary.total_minutes} minutes logged.")

    async def set_and_track_goal(self) -> None:
        if self.store.weekly_goal == 0:
            try:
                text = await self._read("Set your weekly goal (in minutes): ")
            except MissingInput as e:
                print(f"Error: {e}")
                return
            if aggregator.set_goal(self.store, parse_int_or_zero(text)):
                print(f"Goal set to {self.store.weekly_goal} minutes.")
        progress = aggregator.track_progress(self.store)
        print(f"You've achieved {progress.achieved}/{progress.goal} minutes this week.")
