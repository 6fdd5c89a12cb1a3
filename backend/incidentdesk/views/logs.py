import csv
import io
from typing import Iterable

CSV_HEADER = ["Timestamp", "Severity", "Source", "Source IP", "Action", "Description"]


def logs_to_csv(logs: Iterable) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for log in logs:
        severity = getattr(log.severity, "value", log.severity)
        writer.writerow([log.event_time.isoformat(), severity, log.source, log.source_ip, log.action, log.description])
    return buf.getvalue()
