"""Publication, report, opportunity and newsletter routes — extra endpoints.

Tests:
    - Download redirects to the file and counts; missing file → 404 envelope
    - Opportunity detail reads bump views
    - by-type and annual paths; latest newsletter
    - Unknown route type values rejected by path validation
    - Applications: accepted while open, listed per opportunity, 400 when closed
    - Newsletter stats; blank filter values ignored
"""


async def _post(client, path, body):
    response = await client.post(path, json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _publication(title, **extra):
    return {"title": title, "type": "guide", "description": "About", **extra}


async def test_publication_download_redirects_and_counts(client):
    pub = await _post(client, "/api/publications", _publication(
        "Water Guide", fileUrl="https://files.example.org/water.pdf",
    ))
    response = await client.get(f"/api/publications/{pub['id']}/download")
    assert response.status_code == 302
    assert response.headers["location"] == "https://files.example.org/water.pdf"
    detail = await client.get("/api/publications/water-guide")
    assert detail.json()["data"]["downloadCount"] == 1


async def test_publication_download_without_file(client):
    pub = await _post(client, "/api/publications", _publication("No File"))
    response = await client.get(f"/api/publications/{pub['id']}/download")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "File not found", "data": None}


async def test_publications_by_type_and_recent(client):
    await _post(client, "/api/publications", _publication("Handbook One", type="handbook"))
    await _post(client, "/api/publications", _publication("Guide One"))
    by_type = await client.get("/api/publications/type/handbook")
    assert [p["title"] for p in by_type.json()["data"]["items"]] == ["Handbook One"]
    recent = await client.get("/api/publications/recent")
    assert len(recent.json()["data"]) == 2
    bad = await client.get("/api/publications/type/magazine")
    assert bad.status_code == 400


async def test_reports_annual(client):
    body = {"type": "annual", "description": "Summary", "status": "published"}
    await _post(client, "/api/reports", {"title": "Annual 2024", "year": 2024, **body})
    await _post(client, "/api/reports", {"title": "Annual 2025", "year": 2025, **body})
    response = await client.get("/api/reports/annual/2025")
    assert [r["title"] for r in response.json()["data"]["items"]] == ["Annual 2025"]


async def test_opportunity_views_counted(client):
    opp = await _post(client, "/api/opportunities", {
        "title": "Program Officer",
        "type": "job",
        "description": "Lead programs",
        "location": "Kampala",
        "applicationDeadline": "2099-01-01T00:00:00Z",
        "howToApply": "Email us",
    })
    assert opp["views"] == 0
    await client.get("/api/opportunities/program-officer")
    response = await client.get(f"/api/opportunities/{opp['id']}")
    assert response.json()["data"]["views"] == 2
    active = await client.get("/api/opportunities/active")
    assert active.json()["data"]["total"] == 1


async def test_latest_newsletter_404_then_found(client):
    missing = await client.get("/api/newsletters/latest")
    assert missing.status_code == 404
    await _post(client, "/api/newsletters", {
        "title": "Spring Issue", "subject": "Spring", "content": "Hello",
    })
    drafts = await client.get("/api/newsletters/status/draft")
    assert [n["title"] for n in drafts.json()["data"]["items"]] == ["Spring Issue"]


def _opportunity(title, **extra):
    return {
        "title": title,
        "type": "job",
        "description": "Lead programs",
        "location": "Kampala",
        "applicationDeadline": "2099-01-01T00:00:00Z",
        "howToApply": "Apply online",
        **extra,
    }


async def test_apply_then_list_applications(client):
    opp = await _post(client, "/api/opportunities", _opportunity("Data Analyst"))
    response = await client.post(f"/api/opportunities/{opp['id']}/apply", json={
        "name": "Ana Reyes", "email": "ana@example.org", "coverLetter": "Keen to help",
    })
    assert response.status_code == 200
    assert response.json() == {
        "success": True, "message": "Application submitted successfully", "data": None,
    }
    listed = await client.get(f"/api/opportunities/{opp['id']}/applications")
    [application] = listed.json()["data"]
    assert application["name"] == "Ana Reyes"
    assert application["coverLetter"] == "Keen to help"
    assert application["opportunityId"] == opp["id"]


async def test_apply_closed_or_expired(client):
    filled = await _post(client, "/api/opportunities", _opportunity("Filled", status="filled"))
    response = await client.post(f"/api/opportunities/{filled['id']}/apply", json={
        "name": "Bo", "email": "bo@example.org",
    })
    assert response.status_code == 400
    assert response.json()["message"] == "This opportunity is no longer accepting applications"

    expired = await _post(client, "/api/opportunities", _opportunity(
        "Expired", applicationDeadline="2020-01-01T00:00:00Z",
    ))
    response = await client.post(f"/api/opportunities/{expired['id']}/apply", json={
        "name": "Bo", "email": "bo@example.org",
    })
    assert response.status_code == 400
    assert response.json()["message"] == "Application deadline has passed"


async def test_apply_requires_valid_email(client):
    opp = await _post(client, "/api/opportunities", _opportunity("Intern"))
    response = await client.post(f"/api/opportunities/{opp['id']}/apply", json={
        "name": "Bo", "email": "bo@",
    })
    assert response.status_code == 400


async def test_newsletter_stats(client):
    await client.post("/api/subscribers/subscribe", json={"email": "c@example.org"})
    await _post(client, "/api/newsletters", {
        "title": "Draft Issue", "subject": "Soon", "content": "Hello",
    })
    response = await client.get("/api/newsletters/stats")
    assert response.status_code == 200
    assert response.json()["data"] == {
        "totalSubscribers": 1,
        "totalNewsletters": 1,
        "sentNewsletters": 0,
        "recentNewsletters": [],
    }


async def test_blank_filter_value_lists_everything(client):
    await _post(client, "/api/publications", _publication("Any Status"))
    response = await client.get("/api/publications?status=&type=")
    assert response.status_code == 200
    assert response.json()["data"]["total"] == 1
