# Global configuration for the simulator.

# Upper bound for arrival and burst times, keeps timelines finite and renderable.
MAX_TIME_UNIT = 500

# Timeline label for a time unit in which no process is eligible to run.
IDLE = "IDLE"

DEFAULT_ALGORITHMS = ["fcfs", "sjf", "srtf"]

LOG_FORMAT = "%(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
