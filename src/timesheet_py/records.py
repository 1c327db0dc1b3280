from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .utils.durations import DATE_FMT, format_duration, format_timestamp

TIMING_COLUMNS = ["Project_Name", "Start_Time", "Stop_Time", "Overall_Time"]
COMPLETED_COLUMNS = ["Project_Name", "Total_Time", "Completed_Date"]


@dataclass(frozen=True)
class TimingRecord:
    project_name: str
    start_time: datetime
    stop_time: datetime

    @property
    def overall_time(self) -> timedelta:
        return self.stop_time - self.start_time

    def to_row(self) -> dict[str, str]:
        return {
            "Project_Name": self.project_name,
            "Start_Time": format_timestamp(self.start_time),
            "Stop_Time": format_timestamp(self.stop_time),
            "Overall_Time": format_duration(self.overall_time),
        }


@dataclass(frozen=True)
class CompletedRecord:
    project_name: str
    total_time: timedelta
    completed_date: date

    def to_row(self) -> dict[str, str]:
        return {
            "Project_Name": self.project_name,
            "Total_Time": format_duration(self.total_time),
            "Completed_Date": self.completed_date.strftime(DATE_FMT),
        }
