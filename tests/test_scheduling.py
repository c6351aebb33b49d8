import pytest

from algokit.scheduling import Job, sequence_jobs

SAMPLE = [
    Job(1, 56, 288),
    Job(2, 27, 435),
    Job(3, 67, 401),
    Job(4, 64, 368),
    Job(5, 94, 248),
    Job(6, 54, 361),
    Job(7, 43, 108),
    Job(8, 96, 167),
    Job(9, 73, 251),
    Job(10, 96, 170),
    Job(11, 14, 156),
    Job(12, 78, 184),
    Job(13, 61, 370),
    Job(14, 77, 424),
    Job(15, 68, 397),
    Job(16, 40, 375),
    Job(17, 36, 218),
]


def test_sample_schedules_every_job():
    slots = sequence_jobs(SAMPLE)
    scheduled = [job for job in slots if job is not None]
    assert len(scheduled) == 17
    assert sum(job.profit for job in scheduled) == 4921
    assert len(slots) == max(job.deadline for job in SAMPLE)


def test_jobs_run_before_their_deadlines():
    slots = sequence_jobs(SAMPLE)
    for time, job in enumerate(slots, start=1):
        if job is not None:
            assert job.deadline >= time
    scheduled = [job for job in slots if job is not None]
    assert len(set(scheduled)) == len(scheduled)


def test_more_profitable_job_wins_contested_slot():
    cheap = Job(1, 1, 10)
    dear = Job(2, 1, 20)
    assert sequence_jobs([cheap, dear]) == [dear]


def test_job_takes_latest_free_slot():
    first = Job(1, 2, 50)
    second = Job(2, 2, 40)
    assert sequence_jobs([second, first]) == [second, first]


def test_zero_deadline_is_never_scheduled():
    job = Job(1, 0, 99)
    assert sequence_jobs([job]) == []


def test_empty_input():
    assert sequence_jobs([]) == []


def test_negative_deadline_rejected():
    with pytest.raises(ValueError):
        sequence_jobs([Job(1, -1, 5)])