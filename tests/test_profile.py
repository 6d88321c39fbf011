def test_get_profile_returns_public_projection(client, make_user):
    user, headers = make_user("me@example.com", "SEEKER", name="Me", skills=["Go"], preferredLocation="Remote")
    r = client.get("/profile", headers=headers)
    assert r.status_code == 200, r.text
    profile = r.json()["user"]
    assert profile == {
        "id": user["id"],
        "name": "Me",
        "email": "me@example.com",
        "role": "SEEKER",
        "skills": ["Go"],
        "experience": None,
        "preferredRole": None,
        "preferredLocation": "Remote",
    }


def test_update_profile_writes_only_supplied_fields(client, make_user):
    _, headers = make_user("edit@example.com", "SEEKER", name="Before", experience="junior")
    r = client.put("/profile", json={"skills": ["Go", "SQL"], "preferredRole": "Backend"}, headers=headers)
    assert r.status_code == 200, r.text
    user = r.json()["user"]
    assert user["skills"] == ["Go", "SQL"]
    assert user["preferredRole"] == "Backend"
    assert user["name"] == "Before"
    assert user["experience"] == "junior"

    assert client.get("/profile", headers=headers).json()["user"]["skills"] == ["Go", "SQL"]


def test_updated_skills_drive_the_feed_score(client, make_user, make_job):
    _, employer_headers = make_user("boss@example.com", "EMPLOYER")
    make_job(employer_headers, skills=["Go", "SQL", "Docker", "AWS"])
    seeker, headers = make_user("grow@example.com", "SEEKER", skills=["Go"])

    assert client.get("/jobs", params={"seekerId": seeker["id"]}).json()["jobs"][0]["matchScore"] == 0.25
    client.put("/profile", json={"skills": ["Go", "SQL", "AWS"]}, headers=headers)
    assert client.get("/jobs", params={"seekerId": seeker["id"]}).json()["jobs"][0]["matchScore"] == 0.75


def test_update_profile_rejects_blank_name(client, make_user):
    _, headers = make_user("blank@example.com", "EMPLOYER")
    r = client.put("/profile", json={"name": "  "}, headers=headers)
    assert r.status_code == 400
    assert "name" in r.json()["error"]


def test_profile_of_deleted_user_is_404(client, make_user, db_session):
    from backend.app.models.user import User

    user, headers = make_user("gone@example.com", "SEEKER")
    db_session.query(User).filter(User.id == user["id"]).delete()
    db_session.commit()

    r = client.get("/profile", headers=headers)
    assert r.status_code == 404
    assert r.json() == {"error": "User not found"}


def test_update_profile_blank_optional_fields_clear_them(client, make_user):
    _, headers = make_user(
        "clear@example.com", "SEEKER", experience="5 years", preferredRole="Backend", preferredLocation="Remote"
    )
    r = client.put(
        "/profile",
        json={"experience": "", "preferredRole": "", "preferredLocation": "  "},
        headers=headers,
    )
    assert r.status_code == 200, r.text
    user = r.json()["user"]
    assert user["experience"] is None
    assert user["preferredRole"] is None
    assert user["preferredLocation"] is None
