"""Greedy job sequencing with deadlines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by time ``deadline``."""

    job_id: int
    deadline: int
    profit: int


def sequence_jobs(jobs: Iterable[Job]) -> list[Job | None]:
    """Schedule jobs greedily by profit, each in the latest free slot up to its deadline.

    Returns the timetable: item ``t - 1`` is the job run in time slot ``t``,
    or None if the slot stays empty. It has one slot per unit up to the
    largest deadline.
    """
    items = list(jobs)
    if any(job.deadline < 0 for job in items):
        raise ValueError("deadlines must be non-negative")
    horizon = max((job.deadline for job in items), default=0)
    slots: list[Job | None] = [None] * horizon
    for job in sorted(items, key=lambda job: -job.profit):
        for slot in range(job.deadline, 0, -1):
            if slots[slot - 1] is None:
                slots[slot - 1] = job
                break
    return slots