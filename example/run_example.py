#!/usr/bin/env python3
"""
Simple example demonstrating the schedule day rows.
Builds a short conference morning and prints the rows a list view would show.
"""

from datetime import datetime, timezone
import sys
import os

# Add parent directory to path so we can import schedule_rows
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from schedule_rows import ItemType, ScheduleItem, ScheduleDayList
import json


def _ms(hour, minute=0):
    return int(datetime(2025, 11, 10, hour, minute, tzinfo=timezone.utc).timestamp() * 1000)


class TextRenderer:
    def render_session(self, item, tag_metadata):
        tags = f" [{', '.join(tag_metadata)}]" if tag_metadata else ""
        return f"    {item.title}{tags}"

    def render_break(self, item):
        return f"    ~ {item.title} ~"

    def render_time_header(self, start_time):
        start = datetime.fromtimestamp(start_time / 1000, tz=timezone.utc)
        return start.strftime('%I:%M %p')


def main():
    items = [
        ScheduleItem(session_id="s1", title="Keynote", start_time=_ms(9), end_time=_ms(10)),
        ScheduleItem(title="Coffee", start_time=_ms(10), end_time=_ms(10, 20), type=ItemType.BREAK),
        ScheduleItem(session_id="s2", title="What's new in Python", start_time=_ms(10, 20), end_time=_ms(11)),
        ScheduleItem(session_id="s3", title="Async patterns", start_time=_ms(10, 20), end_time=_ms(11)),
        ScheduleItem(title="Lunch", start_time=_ms(12), end_time=_ms(13), type=ItemType.BREAK),
    ]

    day = ScheduleDayList(
        show_time_separators=True,
        tag_metadata=["python", "talks"],
        on_changed=lambda: print("Rows changed, redrawing..."),
    )
    day.update_items(items)

    output = []
    for position, row in enumerate(day.rows):
        output.append({
            'kind': day.item_kind(position).value,
            'id': day.item_id(position),
        })

    print(json.dumps(output, indent=2))

    renderer = TextRenderer()
    for position in range(len(day)):
        print(day.render(position, renderer))

    now = _ms(10, 45)
    anchor = day.find_time_header_position_for_time(now)
    print(f"Scroll anchor for 10:45: row {anchor}")


if __name__ == '__main__':
    main()
