from rustdrill.drills.threads import JobStatus, run_jobs


def test_no_jobs_means_no_waiting(capsys):
    assert run_jobs(0, 0.0, 0.0) == 0
    assert "waiting" not in capsys.readouterr().out


def test_waits_until_jobs_are_done(capsys):
    waits = run_jobs(3, 0.01, 0.005)
    assert waits >= 1
    assert capsys.readouterr().out.count("waiting... \n") == waits


def test_job_status_starts_at_zero():
    status = JobStatus()
    status.jobs_completed += 2
    assert status.jobs_completed == 2