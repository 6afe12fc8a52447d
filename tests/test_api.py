"""HTTP surface used by the rendering client."""


class TestHealth:

    def test_health_check(self, client):
        response = client.get("/healthz")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSimulation:

    def test_initial_snapshot_has_defaults(self, client):
        data = client.get("/simulation").json()

        assert data["tick"] == 0
        assert len(data["jobs"]) == 9
        assert len(data["workers"]) == 7
        assert data["slots"] == {"remaining": 9, "capacity": 9}
        assert data["driver"]["running"] is False

    def test_tick_reports_started_jobs(self, client):
        response = client.post("/simulation/tick")
        assert response.status_code == 200
        data = response.json()
        assert data["tick"] == 1
        assert data["started"] == [1, 2, 3, 4]
        assert data["errors"] == []

    def test_tick_count_and_metrics(self, client):
        client.post("/simulation/tick", params={"count": 3})

        metrics = client.get("/metrics").json()
        assert metrics["overall_total"] == 27
        assert len(metrics["rows"]) == 9

        table = client.get("/metrics/table")
        assert table.text.startswith("Change State Durations (Ticks)")
        export = client.get("/metrics/export")
        assert export.text.splitlines()[0].startswith("Name\tNot Started")

    def test_pause_speed_and_resume(self, client):
        assert client.post("/simulation/pause").json()["paused"] is True
        assert client.post("/simulation/pause").json()["paused"] is False

        data = client.post("/simulation/speed", json={"factor": 2}).json()
        assert data["speed"] == 2

        assert client.post("/simulation/speed", json={"factor": 0}).status_code == 422

        client.post("/simulation/pause")
        assert client.post("/simulation/resume").json()["paused"] is False

    def test_run_with_text(self, client):
        client.post("/simulation/tick", params={"count": 5})
        response = client.post("/simulation/run", json={"jobs_text": "A: F\nnope\nB: B"})
        assert response.status_code == 200

        data = client.get("/simulation").json()
        assert data["tick"] == 0
        assert [job["name"] for job in data["jobs"]] == ["A", "B"]
        assert len(data["workers"]) == 7

    def test_reset_restores_defaults(self, client):
        client.post("/jobs", json={"tasks": "F"})
        client.post("/simulation/reset")
        assert len(client.get("/jobs").json()) == 9

    def test_defaults_text(self, client):
        data = client.get("/simulation/defaults").json()
        assert data["workers_text"].startswith("Al: F")
        assert "DB-only 3: DDDTO" in data["jobs_text"]


class TestJobs:

    def test_create_and_get_job(self, client):
        response = client.post("/jobs", json={"tasks": "fb", "name": "Login page"})
        assert response.status_code == 200
        job_id = response.json()["id"]
        assert job_id == 10

        job = client.get(f"/jobs/{job_id}").json()
        assert job["name"] == "Login page"
        assert job["status"] == "notStarted"
        assert job["task_code"] == "FB"
        assert job["progress"] == "0/2"

    def test_create_job_without_known_skills(self, client):
        response = client.post("/jobs", json={"tasks": "zz"})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_SKILL_SET"

    def test_unknown_job(self, client):
        response = client.get("/jobs/999")
        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "NOT_FOUND"

    def test_random_job(self, client):
        response = client.post("/jobs/random")
        assert response.status_code == 200
        job = client.get(f"/jobs/{response.json()['id']}").json()
        assert job["name"] == "Dynamic 1"
        assert len(job["task_sequence"]) == 5

    def test_load_jobs(self, client):
        response = client.post("/jobs/load", json={"text": "Al: F\nBad Line\nBob: BD"})
        assert response.json() == {"created": 2, "ids": [10, 11]}


class TestWorkers:

    def test_list_workers(self, client):
        workers = client.get("/workers").json()
        assert [w["name"] for w in workers][:3] == ["Al", "Alice", "Bob"]
        assert workers[0]["skill_code"] == "F"
        assert workers[0]["busy"] is False

    def test_create_worker(self, client):
        response = client.post("/workers", json={"name": "Dev", "skills": "FBO"})
        worker = client.get(f"/workers/{response.json()['id']}").json()
        assert worker["skills"] == ["Front-End", "Back-End", "Ops"]

    def test_create_worker_without_skills(self, client):
        response = client.post("/workers", json={"name": "Dev", "skills": "??"})
        assert response.status_code == 400

    def test_load_workers(self, client):
        response = client.post("/workers/load", json={"text": "X: O\n\nbroken"})
        assert response.json()["created"] == 1
