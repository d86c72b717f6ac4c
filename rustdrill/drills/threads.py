"""Solution on threads: a worker completes jobs while the caller polls for progress."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass
class JobStatus:
    """How many jobs the worker has completed so far."""

    jobs_completed: int = 0


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> int:
    """Complete jobs on a worker thread, printing "waiting... " on each poll.

    Returns the number of times the caller had to wait.
    """
    status = JobStatus()
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            with lock:
                status.jobs_completed += 1

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    waits = 0
    while True:
        with lock:
            if status.jobs_completed >= jobs:
                break
        print("waiting... ")
        waits += 1
        time.sleep(poll_delay)
    thread.join()
    return waits