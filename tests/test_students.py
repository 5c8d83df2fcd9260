def test_list_students(client):
    r = client.get("/students")
    assert r.status_code == 200
    assert r.json()[0] == {
        "id": 1,
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@example.com",
        "dateOfBirth": "2000-01-01",
        "studentId": "S1234",
    }


def test_get_missing_student(client):
    r = client.get("/students/999")
    assert r.status_code == 404
    assert r.json() == {"message": "Student not found"}


def test_create_student(client):
    payload = {
        "firstName": "Alice",
        "lastName": "Brown",
        "email": "alice.brown@example.com",
        "dateOfBirth": "2002-03-14",
        "studentId": "S3456",
    }
    r = client.post("/students", json=payload)
    assert r.status_code == 201, r.text
    assert r.json() == {"id": 4, **payload}


def test_create_student_reports_missing_fields(client):
    r = client.post("/students", json={"firstName": "Jane", "email": "jane.other@example.com"})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid data"
    assert [e["field"] for e in body["errors"]] == ["lastName", "dateOfBirth", "studentId"]


def test_create_student_duplicate_email(client):
    r = client.post(
        "/students",
        json={
            "firstName": "John",
            "lastName": "Again",
            "email": "john.doe@example.com",
            "dateOfBirth": "2000-01-01",
            "studentId": "S0000",
        },
    )
    assert r.status_code == 409


def test_update_student(client):
    r = client.put(
        "/students/3",
        json={
            "firstName": "Paul",
            "lastName": "Martin-Leroy",
            "email": "paul.martin@example.com",
            "dateOfBirth": "2001-09-23",
            "studentId": "S9012",
        },
    )
    assert r.status_code == 200
    assert r.json()["lastName"] == "Martin-Leroy"


def test_delete_student_removes_its_grades(client):
    r = client.delete("/students/2")
    assert r.status_code == 204
    assert client.get("/grades/student/2").status_code == 404
    assert client.get("/stats/student/2").status_code == 404
