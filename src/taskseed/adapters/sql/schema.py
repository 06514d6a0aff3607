"""Column contract of the tasks table.

The reader maps rows by column name. Only the required columns must exist;
extra columns are ignored and the optional ones default to NULL.
"""

TASKS_TABLE = "tasks"

SELECT_ALL_TASKS = f"SELECT * FROM {TASKS_TABLE}"

REQUIRED_COLUMNS = ("id", "title", "description", "due_date", "status")

OPTIONAL_COLUMNS = ("assigned_to", "priority")

# Reference layout, columns in compatibility order
CREATE_TASKS_TABLE = f"""
CREATE TABLE IF NOT EXISTS {TASKS_TABLE} (
    id INTEGER PRIMARY KEY,
    title TEXT,
    description TEXT NOT NULL,
    due_date DATE NOT NULL,
    status TEXT NOT NULL DEFAULT 'Pending',
    assigned_to INTEGER,
    priority INTEGER CHECK (priority >= 0 AND priority < 5)
)
"""
