"""macOS Reminders.app adapter driven through osascript."""

import subprocess
from datetime import datetime
from typing import Optional

from pickup_monitor.core import Reminder, ReminderService

FIELD_SEP = chr(31)
RECORD_SEP = chr(30)

UPCOMING_SCRIPT = r'''
use framework "Foundation"
use scripting additions

property isoFormatter : missing value

on isoStringFromDate(theDate)
	if isoFormatter is missing value then
		set isoFormatter to current application's NSISO8601DateFormatter's alloc()'s init()
	end if
	return (isoFormatter's stringFromDate_(theDate)) as text
end isoStringFromDate

on run argv
	set daysAhead to (item 1 of argv) as integer
	set horizon to (current date) + daysAhead * days
	set fs to character id 31
	set rs to character id 30
	set outText to ""
	tell application "Reminders"
		repeat with r in (reminders whose completed is false)
			set rname to ""
			set rbody to ""
			set dueText to ""
			set inWindow to true
			try
				set rname to name of r as text
			end try
			try
				set rbody to body of r as text
			end try
			try
				set dueValue to due date of r
				if dueValue is not missing value then
					if dueValue > horizon then set inWindow to false
					set dueText to my isoStringFromDate(dueValue)
				end if
			end try
			if inWindow then set outText to outText & rname & fs & rbody & fs & dueText & rs
		end repeat
	end tell
	return outText
end run
'''

CREATE_SCRIPT = r'''
on run argv
	set rTitle to item 1 of argv
	set rNotes to item 2 of argv
	set rPriority to (item 3 of argv) as integer
	set listName to item 4 of argv
	tell application "Reminders"
		if not (exists list listName) then make new list with properties {name:listName}
		tell list listName
			make new reminder with properties {name:rTitle, body:rNotes, priority:rPriority}
		end tell
	end tell
	return "created"
end run
'''


def run_osascript(script: str, *args: str) -> str:
    """Run an AppleScript passed on stdin and return its stdout."""
    proc = subprocess.run(["osascript", "-", *args], input=script, text=True, capture_output=True)
    if proc.returncode != 0:
        raise RuntimeError((proc.stderr or proc.stdout or "osascript failed").strip())
    return proc.stdout


def _parse_iso(value: str) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class MacOSReminders(ReminderService):
    """Read and create items in the system Reminders app."""

    def get_upcoming(self, days_ahead: int) -> list[Reminder]:
        out = run_osascript(UPCOMING_SCRIPT, str(days_ahead))

        reminders: list[Reminder] = []
        for rec in out.split(RECORD_SEP):
            rec = rec.strip("\r\n")
            if not rec:
                continue
            parts = rec.split(FIELD_SEP)
            if len(parts) < 3 or not parts[0]:
                continue
            reminders.append(
                Reminder(title=parts[0], notes=parts[1], due_at=_parse_iso(parts[2]))
            )
        return reminders

    def create_reminder(
        self, title: str, notes: str, priority: int, list_title: str
    ) -> None:
        run_osascript(CREATE_SCRIPT, title, notes, str(priority), list_title)
