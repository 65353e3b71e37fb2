"""Sample extraction inputs shaped like the school's weekly schedule PDFs."""

from schedule_ingest.models import TextFragment

# Mon/Wed/Fri meet periods 1-4, Tue/Thu only 1 and 2. Periods 3 and 4 are
# printed twice on each long day: once after "A Lunch", once after "B Lunch".
STREAM_WEEK = """April 6th - 10th
Monday
1-4
Tuesday
1,2
Wednesday
1-4
Thursday
1,2
Friday
1-4
Period 1
7:30 - 8:25 (55)
Period 1
7:30 - 9:00 (90)
Period 1
7:30 - 8:25 (55)
Period 1
7:30 - 9:00 (90)
Period 1
7:30 - 8:25 (55)
Period 2
8:30 - 9:25 (55)
Period 2
9:05 - 10:35 (90)
Period 2
8:30 - 9:25 (55)
Period 2
9:05 - 10:35 (90)
Period 2
8:30 - 9:25 (55)
A Lunch
Period 3
10:05 - 10:55 (50)
Period 3
10:05 - 10:55 (50)
Period 3
10:05 - 10:55 (50)
Period 4
12:00 - 12:50 (50)
Period 4
12:00 - 12:50 (50)
Period 4
12:00 - 12:50 (50)
B Lunch
Period 3
10:40 - 11:30 (50)
Period 3
10:40 - 11:30 (50)
Period 3
10:40 - 11:30 (50)
Period 4
1:00 - 1:50 (50)
Period 4
1:00 - 1:50 (50)
Period 4
1:00 - 1:50 (50)
"""

HEADER_Y = 720.0
COLUMN_X = (40.0, 160.0, 280.0, 400.0, 520.0)
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")


def period_cell(column: int, period: int, label_y: float, times: str | None) -> list[TextFragment]:
    """A period label and (optionally) its time range one 12pt row below."""
    x = COLUMN_X[column] + 2
    cell = [TextFragment(text=f"Period {period}", x=x, y=label_y)]
    if times is not None:
        cell.append(TextFragment(text=times, x=x, y=label_y - 12))
    return cell


def layout_week() -> list[TextFragment]:
    """Fragments of a Monday-Friday page; Monday has an A/B lunch split."""
    fragments = [TextFragment(text="April 6th - 10th", x=250.0, y=760.0)]
    fragments += [
        TextFragment(text=name, x=x, y=HEADER_Y)
        for name, x in zip(DAY_NAMES, COLUMN_X)
    ]
    for column in range(5):
        fragments += period_cell(column, 1, 680.0, "7:30 - 8:25 (55)")
        fragments += period_cell(column, 2, 640.0, "8:30 - 9:25 (55)")

    # Monday: 3 and 4 printed once per lunch, top of page first
    fragments += period_cell(0, 3, 600.0, "10:05 - 10:55 (50)")
    fragments += period_cell(0, 3, 540.0, "10:40 - 11:30 (50)")
    fragments += period_cell(0, 4, 500.0, "12:00 - 12:50 (50)")
    fragments += period_cell(0, 4, 460.0, "1:00 - 1:50 (50)")
    return fragments
