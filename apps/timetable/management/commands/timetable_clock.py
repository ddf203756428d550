import threading

from django.core.management.base import BaseCommand

from apps.timetable.indicator import IndicatorTicker, TimeIndicator, grid_hours, refresh_interval


class Command(BaseCommand):
    help = 'Show where the current-time marker sits on the weekly calendar grid'

    def add_arguments(self, parser):
        parser.add_argument(
            '--interval',
            type=int,
            default=None,
            help='Refresh interval in seconds (defaults to TIMETABLE_INDICATOR_INTERVAL)'
        )
        parser.add_argument(
            '--once',
            action='store_true',
            help='Print the marker once and exit'
        )

    def handle(self, *args, **options):
        rows = [TimeIndicator(hour, index) for index, hour in enumerate(grid_hours())]

        if options['once']:
            self.print_marker(rows)
            return

        interval = options['interval'] or refresh_interval()
        self.stdout.write(f"Watching the calendar clock every {interval} seconds (Ctrl+C to stop)")

        ticker = IndicatorTicker(lambda: self.print_marker(rows), interval, name="timetable-clock")
        try:
            with ticker:
                threading.Event().wait()
        except KeyboardInterrupt:
            self.stdout.write("\nClock stopped")

    def print_marker(self, rows):
        shown = [row for row in rows if row.refresh().visible]
        if not shown:
            self.stdout.write("Marker: hidden")
            return

        row = shown[0]
        state = row.state
        if state.out_of_range:
            edge = "top" if state.offset_percent == 0 else "bottom"
            self.stdout.write(f"Marker: {state.label} (outside grid, pinned to {edge})")
        else:
            self.stdout.write(
                f"Marker: {state.label} in row {row.hour_index} "
                f"({row.start_hour:02d}:00) at {state.offset_percent:.0f}%"
            )
