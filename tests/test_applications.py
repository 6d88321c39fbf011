def _apply(client, headers, job_id, message="I would love to join."):
    return client.post("/applications", json={"jobId": job_id, "message": message}, headers=headers)


def test_seeker_applies_once(client, make_user, make_job):
    employer, employer_headers = make_user("emp@example.com", "EMPLOYER", name="Acme")
    job = make_job(employer_headers)["job"]
    seeker, seeker_headers = make_user("seek@example.com", "SEEKER")

    first = _apply(client, seeker_headers, job["id"])
    assert first.status_code == 201, first.text
    application = first.json()["application"]
    assert application["jobId"] == job["id"]
    assert application["seekerId"] == seeker["id"]
    assert application["job"]["employer"] == {"id": employer["id"], "name": "Acme", "email": "emp@example.com"}

    second = _apply(client, seeker_headers, job["id"])
    assert second.status_code == 400, second.text
    assert second.json() == {"error": "You already applied to this job"}


def test_unique_constraint_backs_up_the_duplicate_check(client, make_user, make_job, monkeypatch):
    import backend.app.api.application as application_api

    _, employer_headers = make_user("emp2@example.com", "EMPLOYER")
    job = make_job(employer_headers)["job"]
    _, seeker_headers = make_user("race@example.com", "SEEKER")
    assert _apply(client, seeker_headers, job["id"]).status_code == 201

    # Simulate the second of two concurrent requests: its pre-check saw nothing.
    monkeypatch.setattr(application_api, "_find_application", lambda *args, **kwargs: None)

    r = _apply(client, seeker_headers, job["id"])
    assert r.status_code == 400, r.text
    assert r.json() == {"error": "You already applied to this job"}


def test_apply_to_unknown_job_is_404(client, make_user):
    _, seeker_headers = make_user("lost@example.com", "SEEKER")
    r = _apply(client, seeker_headers, "6f1c2a4e-4a43-4bb5-9a55-2a8f8c1b0d11")
    assert r.status_code == 404
    assert r.json() == {"error": "Job not found"}


def test_apply_validation(client, make_user, make_job):
    _, employer_headers = make_user("emp3@example.com", "EMPLOYER")
    job = make_job(employer_headers)["job"]
    _, seeker_headers = make_user("val@example.com", "SEEKER")

    assert _apply(client, seeker_headers, "not-a-uuid").status_code == 400
    assert _apply(client, seeker_headers, job["id"], message="").status_code == 400
    assert _apply(client, seeker_headers, job["id"], message="   ").status_code == 400
    too_long = _apply(client, seeker_headers, job["id"], message="x" * 1001)
    assert too_long.status_code == 400
    assert "message" in too_long.json()["error"]

    ok = _apply(client, seeker_headers, job["id"], message="x" * 1000)
    assert ok.status_code == 201, ok.text


def test_only_seekers_can_apply(client, make_user, make_job):
    _, employer_headers = make_user("emp4@example.com", "EMPLOYER")
    job = make_job(employer_headers)["job"]
    _, admin_headers = make_user("admin@example.com", "ADMIN")

    assert _apply(client, employer_headers, job["id"]).status_code == 401
    assert _apply(client, admin_headers, job["id"]).status_code == 401
    assert client.post("/applications", json={"jobId": job["id"], "message": "hi"}).status_code == 401
