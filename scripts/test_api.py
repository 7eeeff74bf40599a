"""HTTP-level tests for the recommend and job lookup endpoints."""

from fakes import ScriptedModel, role_details

from backend.db.store import JobRoleStore
from backend.errors import StoreError
from backend.models import RoleDetail

LONG_DESCRIPTION = (
    "Site reliability engineers keep production healthy by automating operations, "
    "defining service level objectives, running incident response and capacity planning."
)


def _seed(store, name, description=LONG_DESCRIPTION, **kwargs):
    store.insert(RoleDetail(role_name=name, description=description, **kwargs))


def test_recommend_empty_skills_is_400(make_client):
    client = make_client(ScriptedModel())
    response = client.post("/recommend", json={"skills": []})
    assert response.status_code == 400
    assert response.json() == {"error": "Skills array required"}


def test_recommend_bad_bodies_are_400(make_client):
    client = make_client(ScriptedModel())
    for body in [{}, {"skills": "Python"}, {"skills": None}, ["Python"]]:
        response = client.post("/recommend", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Skills array required"}

    response = client.post("/recommend", content="not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400


def test_recommend_cached_role_preview(make_client, store):
    _seed(store, "Site Reliability Engineer", project_ideas=[{"title": "Chaos monkey"}, "Status page"])
    client = make_client(ScriptedModel({"roles": [{"role": "site reliability engineer", "score": 42}]}))

    response = client.post("/recommend", json={"skills": ["Linux", "Terraform"]})

    assert response.status_code == 200
    assert response.json() == [
        {
            "role": "Site Reliability Engineer",
            "score": 42.0,
            "preview": LONG_DESCRIPTION[:130] + "...",
            "projectIdeas": ["Chaos monkey", "Status page"],
        }
    ]


def test_recommend_may_return_empty_list(make_client):
    client = make_client(ScriptedModel({"roles": ["Unknown Role"]}), ScriptedModel("no details"))
    response = client.post("/recommend", json={"skills": ["Cobol"]})
    assert response.status_code == 200
    assert response.json() == []


def test_recommend_miss_round_trips_to_job_lookup(make_client):
    generated = role_details("Platform Engineer", LONG_DESCRIPTION)
    client = make_client(
        ScriptedModel({"roles": [{"role": "Platform Engineer", "score": 77}]}),
        ScriptedModel(generated),
    )

    response = client.post("/recommend", json={"skills": ["Kubernetes"]})
    assert response.status_code == 200
    assert [j["role"] for j in response.json()] == ["Platform Engineer"]

    detail = client.get("/job/platform%20engineer").json()
    assert detail == {
        "role": "Platform Engineer",
        "description": generated["description"],
        "techStack": generated["techStack"],
        "resumeKeywords": generated["resumeKeywords"],
        "projectIdeas": generated["projectIdeas"],
        "roadmapLink": generated["roadmapLink"],
    }


def test_recommend_provider_failure_is_500(make_client):
    client = make_client(ScriptedModel(ConnectionError("secret upstream detail")))
    response = client.post("/recommend", json={"skills": ["Python"]})
    assert response.status_code == 500
    assert "error" in response.json()
    assert "secret" not in response.text


def test_recommend_store_failure_is_500(make_client, store, monkeypatch):
    def broken(self, name):
        raise StoreError("lookup failed")

    monkeypatch.setattr(JobRoleStore, "find_by_name", broken)
    client = make_client(ScriptedModel({"roles": ["Backend Developer"]}))

    response = client.post("/recommend", json={"skills": ["Python"]})
    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong"}


def test_get_job_unknown_is_404(make_client):
    response = make_client().get("/job/astronaut")
    assert response.status_code == 404
    assert response.json() == {"error": "Job not found"}


def test_get_job_any_case_and_encoding(make_client, store):
    _seed(
        store,
        "C++ Developer",
        tech_stack=["C++", "CMake"],
        resume_keywords=["RAII"],
        project_ideas=[{"title": "Ray tracer", "level": "hard"}],
        roadmap_link="https://roadmap.sh/cpp",
    )
    client = make_client()
    expected = {
        "role": "C++ Developer",
        "description": LONG_DESCRIPTION,
        "techStack": ["C++", "CMake"],
        "resumeKeywords": ["RAII"],
        "projectIdeas": [{"title": "Ray tracer", "level": "hard"}],
        "roadmapLink": "https://roadmap.sh/cpp",
    }

    for path in ["/job/C%2B%2B%20Developer", "/job/c%2b%2b%20developer", "/job/C%252B%252B%2520DEVELOPER"]:
        response = client.get(path)
        assert response.status_code == 200, path
        assert response.json() == expected


def test_get_job_is_idempotent(make_client, store):
    _seed(store, "Data Engineer")
    client = make_client()
    assert client.get("/job/Data%20Engineer").json() == client.get("/job/Data%20Engineer").json()
    assert len(store.list_all()) == 1


def test_list_jobs_sorted_with_short_previews(make_client, store):
    _seed(store, "Security Analyst", project_ideas=["Port scanner"], roadmap_link="https://roadmap.sh/cyber-security")
    _seed(store, "Android Developer", description="Builds Android apps.")
    _seed(store, "Data Engineer", project_ideas=[{"title": "ETL pipeline"}])

    response = make_client().get("/jobs")

    assert response.status_code == 200
    jobs = response.json()
    assert [j["role"] for j in jobs] == ["Android Developer", "Data Engineer", "Security Analyst"]
    assert all(len(j["preview"]) <= 123 for j in jobs)
    assert jobs[0] == {
        "role": "Android Developer",
        "preview": "Builds Android apps....",
        "projectIdeas": [],
        "roadmapLink": None,
    }
    assert jobs[1]["preview"] == LONG_DESCRIPTION[:120] + "..."
    assert jobs[1]["projectIdeas"] == ["ETL pipeline"]
    assert jobs[2]["roadmapLink"] == "https://roadmap.sh/cyber-security"


def test_unmatched_route_is_404(make_client):
    response = make_client().get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}


def test_security_headers_and_health(make_client):
    response = make_client().get("/health")
    assert response.json() == {"status": "healthy"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_wrong_method_on_known_path_is_404(make_client):
    client = make_client()
    for response in [client.get("/recommend"), client.post("/jobs"), client.delete("/job/x")]:
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}


def test_get_job_non_ascii_name_any_case(make_client, store):
    _seed(store, "Ingénieur Électricien")
    client = make_client()

    for path in ["/job/ing%C3%A9nieur%20%C3%A9lectricien", "/job/ING%C3%89NIEUR%20%C3%89LECTRICIEN"]:
        response = client.get(path)
        assert response.status_code == 200, path
        assert response.json()["role"] == "Ingénieur Électricien"


def test_unexpected_error_is_generic_500(make_client, monkeypatch):
    def broken(self):
        raise RuntimeError("secret internal detail")

    monkeypatch.setattr(JobRoleStore, "list_all", broken)
    client = make_client(raise_server_exceptions=False)

    response = client.get("/jobs")
    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong"}
    assert "secret" not in response.text
    assert response.headers["X-Content-Type-Options"] == "nosniff"
