# src/hypebot/core/messages.py

"""User-facing message texts (kept in one place so tests and UI agree on wording)."""

from __future__ import annotations

DATE_PATTERN = "yyyy-MM-dd"
DATE_TIME_PATTERN = "yyyy-MM-dd HH:mm"

# ---- task model ----
ERROR_EMPTY_NAME = "drop the name of the task, bro I gotta know!"
ERROR_NAME_HAS_DELIMITER = "task names can't contain ' , ' (that's how I keep your file tidy)."
ERROR_DEADLINE_WRONG_FORMAT = (
    f"but I couldn't catch the due date that you put.\n"
    f"Try formatting your due date in this format: {DATE_PATTERN}"
)
ERROR_EVENT_TIME_WRONG_FORMAT = (
    f"but I couldn't catch the times that you put.\n"
    f"Try formatting your time in this format: {DATE_TIME_PATTERN}"
)
ERROR_SEARCH_DATE_WRONG_FORMAT = (
    f"but I couldn't catch the search date that you put.\n"
    f"Try formatting your search date in this format: {DATE_PATTERN}"
)
ERROR_EVENT_TIMES_INORDERED = "make sure your event starts BEFORE it ends, homie!"
ERROR_EVENT_TIME_PASSED = "that event's already come and gone! Try one that's still ahead of us."

# ---- command layer ----
ERROR_DEADLINE_NO_DATE = (
    "make sure you got the due date for that SWAGGIN' deadline you got!\n"
    "Put your due date after a '/' to indicate that you're inputting a due date!"
)
ERROR_EVENT_NO_TIMES = (
    "make sure you got that start time AND end time for that AWESOME event you got!\n"
    "Put a '/' before your start time and end time to indicate you're inputting a time!"
)
ERROR_HAPPENING_NO_DATE = (
    "make sure you got the date you're searching for!\n"
    "Put your search date after a '/' to indicate that you're inputting a search date!"
)
ERROR_TOO_MANY_ARGUMENTS = "whoa, that's too many '/' parts for '{keyword}'. Keep it to {expected}!"
ERROR_TODO_HAS_ARGUMENTS = "todos don't take any '/' dates. Try a deadline or an event instead!"
ERROR_EMPTY_QUERY = "drop some keywords to search for, bro!"
ERROR_INDEX_NOT_NUMBER = "try indicating the index of the task you wanna {action} as a number!"
ERROR_INDEX_OUT_OF_RANGE = "try indicating the index of an existing task you wanna {action}!"
ERROR_INDEX_NOT_POSITIVE = "task numbers start at 1, homie! Try the number of the task you wanna {action}."
ERROR_UNRECOGNIZED = "but I don't think we're vibing when you say '{keyword}'.\nMind if I ask you for anything else, homie?"

# ---- persistence ----
ERROR_LOAD_TASKLIST = "but I couldn't find the file with your saved tasks."
ERROR_READ_TASKLIST = "but I couldn't read the file with your saved tasks."
ERROR_SAVE_TASKLIST = "but I couldn't save your tasks to the drive. They may not stick around after you leave!"
NOTICE_SKIPPED_RECORDS = "I skipped {count} saved task(s) I couldn't make sense of."

# ---- responses ----
ERROR_PREFIX = "I might be tripping bro, my bad, my bad - "
MESSAGE_LIST = "ALRIGHT, Here's that list!"
MESSAGE_LIST_EMPTY = "Your list is EMPTY, homie. Time to add something!"
MESSAGE_ADDED = "HECK YEAH, ADDED: {task}!\nYOU'VE NOW GOT {count} TASKS TO GO!"
MESSAGE_MARKED = "AIGHT, ABSOLUTELY CONQUERED THIS TASK:\n  {task}"
MESSAGE_UNMARKED = "AIGHT, LET'S GET READY TO CONQUER THIS TASK:\n  {task}"
MESSAGE_DELETED = "Say no more, BABY BYE BYE BYE to this task:\n  {task}!\nYOU'VE NOW GOT {count} TASKS TO GO!"
MESSAGE_HAPPENING = "ALRIGHT, Here's everything that's going down on {day}!"
MESSAGE_HAPPENING_NONE = "Nothing's going down on {day}. Enjoy the free time!"
MESSAGE_FOUND = "ALRIGHT, Here's everything matching '{query}'!"
MESSAGE_FOUND_NONE = "Couldn't find anything matching '{query}', homie."
MESSAGE_SAVING = "Alright homie, saving your tasks to your drive..."
MESSAGE_BYE = (
    "Alright homie, it's been a BLAST hanging out with you. Have a wonderful\n"
    "day, and catch you soon again you ABSOLUTE BALLER!"
)
