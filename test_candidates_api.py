from app.main import app
from app.services.container import get_resume_service
from app.services.resume_service import ResumeService


def test_add_candidate_rejects_empty_first_name(client):
    response = client.post(
        "/candidates",
        json={"firstName": "", "lastName": "Hernández", "email": "invalid-email"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "message": "Error adding candidate",
        "error": "Error: Invalid name",
    }


def test_add_candidate_rejects_malformed_body(client):
    response = client.post(
        "/candidates",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Error: Invalid candidate data"


def test_add_candidate_through_all_layers(client, complete_candidate_data):
    response = client.post("/candidates", json=complete_candidate_data)

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Candidate added successfully"
    data = body["data"]
    assert isinstance(data["id"], int)
    assert data["firstName"] == "Roberto"
    assert data["lastName"] == "Díaz"
    assert data["educations"][0]["title"] == "Ingeniería de Software"
    assert data["workExperiences"][0]["endDate"] == "2024-01-31"
    assert data["resumes"][0]["fileType"] == "application/pdf"


def test_duplicate_email_is_a_400(client, complete_candidate_data):
    assert client.post("/candidates", json=complete_candidate_data).status_code == 200

    response = client.post("/candidates", json=complete_candidate_data)

    assert response.status_code == 400
    assert response.json() == {
        "message": "Error adding candidate",
        "error": "Error: The email already exists in the database",
    }


def test_update_missing_candidate_is_a_400(client):
    response = client.post(
        "/candidates",
        json={"id": 404, "firstName": "Pedro", "lastName": "Sánchez", "email": "pedro.sanchez@email.com"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Error: Candidate not found"


def test_get_candidate(client, complete_candidate_data):
    created = client.post("/candidates", json=complete_candidate_data).json()["data"]

    response = client.get(f"/candidates/{created['id']}")

    assert response.status_code == 200
    assert response.json()["email"] == "roberto.diaz@email.com"


def test_get_missing_candidate(client):
    response = client.get("/candidates/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Candidate not found", "error": "Error: Candidate not found"}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_upload_resume(client, config, tmp_path):
    config.upload.directory = str(tmp_path / "uploads")
    app.dependency_overrides[get_resume_service] = lambda: ResumeService(config)

    response = client.post(
        "/upload",
        files={"file": ("cv roberto.pdf", b"%PDF-1.4 resume", "application/pdf")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["fileType"] == "application/pdf"
    assert body["filePath"].endswith("-cv_roberto.pdf")
    assert (tmp_path / "uploads").joinpath(body["filePath"].split("/")[-1]).read_bytes() == b"%PDF-1.4 resume"


def test_upload_rejects_unsupported_type(client, config, tmp_path):
    config.upload.directory = str(tmp_path / "uploads")
    app.dependency_overrides[get_resume_service] = lambda: ResumeService(config)

    response = client.post(
        "/upload",
        files={"file": ("photo.png", b"\x89PNG", "image/png")},
    )

    assert response.status_code == 400
    assert not (tmp_path / "uploads").exists()
