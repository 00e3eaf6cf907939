"""End-to-end tests for the resource directory API."""

import pytest
from fastapi.testclient import TestClient

from resdir.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by the in-memory store."""
    return TestClient(create_app(build_test_container(fastapi=True)))


def create_taxonomy(client: TestClient) -> dict[str, int]:
    """Research > Methods > Qualitative, plus Research > Books."""
    category = client.post("/categories", json={"name": "Research"}).json()
    category_id = category["category"]["id"]
    subcategory = client.post(
        "/subcategories", json={"category_id": category_id, "name": "Methods"}
    ).json()
    qualitative = client.post(
        "/tags",
        json={
            "category_id": category_id,
            "sub_category_id": subcategory["subcategory"]["id"],
            "name": "Qualitative",
        },
    ).json()
    books = client.post(
        "/tags", json={"category_id": category_id, "name": "Books"}
    ).json()
    return {
        "category": category_id,
        "qualitative": qualitative["tag"]["id"],
        "books": books["tag"]["id"],
    }


def submit(client: TestClient, title: str = "Study A", **extra) -> dict:
    body = {
        "submitted_by": "Ada Researcher",
        "date": "2024-03-01",
        "title": title,
        "submitter_email": "ada@example.org",
        **extra,
    }
    response = client.post("/resources", json=body)
    assert response.status_code == 201
    return response.json()["resource"]


class TestHealth:
    """Tests for the health endpoint."""

    def test_reports_healthy(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestTaxonomyEndpoints:
    """Tests for category, subcategory and tag endpoints."""

    def test_create_and_list_categories(self, client):
        """Should create categories and list them in display order."""
        # Act
        second = client.post("/categories", json={"name": "Health", "sort_order": 1})
        first = client.post("/categories", json={"name": "Research"})
        response = client.get("/categories")

        # Assert
        assert first.status_code == 201
        assert second.status_code == 201
        assert first.json()["category"]["slug"] == "research"
        names = [c["name"] for c in response.json()["categories"]]
        assert names == ["Research", "Health"]

    def test_duplicate_category_is_conflict(self, client):
        client.post("/categories", json={"name": "Research"})

        response = client.post("/categories", json={"name": "research"})

        assert response.status_code == 409
        assert response.json()["detail"]["kind"] == "duplicate_name"

    def test_subcategory_under_unknown_category_is_not_found(self, client):
        response = client.post(
            "/subcategories", json={"category_id": 99, "name": "Methods"}
        )

        assert response.status_code == 404

    def test_tag_hierarchy_views(self, client):
        """Admin view lists every tag, public view only attached ones."""
        ids = create_taxonomy(client)
        resource = submit(client, tag_ids=[ids["qualitative"]])
        assert resource["tags"][0]["full_path"] == "Research > Methods > Qualitative"

        admin = client.get("/tags").json()
        public = client.get("/tags", params={"public_only": "true"}).json()

        assert [t["tag_name"] for t in admin["flat"]] == ["Qualitative", "Books"]
        assert [t["tag_name"] for t in public["flat"]] == ["Qualitative"]
        methods = public["hierarchy"]["Research"]["subcategories"]["Methods"]
        assert [t["name"] for t in methods["tags"]] == ["Qualitative"]

    def test_deleted_tag_disappears(self, client):
        ids = create_taxonomy(client)

        response = client.delete(f"/tags/{ids['books']}")
        hierarchy = client.get("/tags").json()

        assert response.status_code == 200
        assert response.json()["is_active"] is False
        assert [t["tag_name"] for t in hierarchy["flat"]] == ["Qualitative"]


class TestResourceEndpoints:
    """Tests for public and admin resource endpoints."""

    def test_submission_waits_for_review(self, client):
        resource = submit(client)

        public = client.get("/resources").json()

        assert resource["status"] == "pending_review"
        assert "submitter_email" not in resource
        assert public == {"resources": [], "total": 0}

    def test_missing_fields_are_reported(self, client):
        response = client.post("/resources", json={"title": "No submitter"})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["kind"] == "validation_failed"
        assert set(detail["fields"]) == {"submitted_by", "date"}

    def test_unknown_tag_rejects_submission(self, client):
        response = client.post(
            "/resources",
            json={
                "submitted_by": "Ada",
                "date": "2024-03-01",
                "title": "Study A",
                "tag_ids": [404],
            },
        )

        assert response.status_code == 422
        assert response.json()["detail"]["kind"] == "tag_attachment_failed"

    def test_moderation_flow(self, client):
        """Approve a submission and find it through the public filters."""
        ids = create_taxonomy(client)
        resource = submit(client, tag_ids=[ids["qualitative"]])
        submit(client, title="Other study")

        pending = client.get("/admin/resources", params={"status": "pending_review"})
        approve = client.patch(
            f"/admin/resources/{resource['id']}/status", json={"status": "published"}
        )
        listed = client.get(
            "/resources", params={"tags": "Qualitative, Books", "sortBy": "title"}
        )

        assert pending.json()["total"] == 2
        assert pending.json()["resources"][0]["submitter_email"] == "ada@example.org"
        assert approve.status_code == 200
        assert approve.json() == {"resource_id": resource["id"], "status": "published"}
        body = listed.json()
        assert [r["title"] for r in body["resources"]] == ["Study A"]
        assert "submitter_email" not in body["resources"][0]

    def test_invalid_transition_is_unprocessable(self, client):
        resource = submit(client)
        client.patch(
            f"/admin/resources/{resource['id']}/status", json={"status": "rejected"}
        )

        response = client.patch(
            f"/admin/resources/{resource['id']}/status", json={"status": "published"}
        )

        assert response.status_code == 422
        assert response.json()["detail"]["kind"] == "invalid_status"

    def test_admin_sorting_and_search(self, client):
        for title in ["Beta notes", "Alpha notes", "Gamma atlas"]:
            client.post(
                "/admin/resources",
                json={"submitted_by": "Ada", "date": "2024-03-01", "title": title},
            )

        response = client.get(
            "/admin/resources",
            params={"search": "NOTES", "sortBy": "title", "sortOrder": "asc"},
        )

        assert [r["title"] for r in response.json()["resources"]] == [
            "Alpha notes",
            "Beta notes",
        ]

    def test_replace_tags_and_edit(self, client):
        ids = create_taxonomy(client)
        resource = submit(client, tag_ids=[ids["qualitative"]])
        url = f"/admin/resources/{resource['id']}"

        tagged = client.put(f"{url}/tags", json={"tag_ids": [ids["books"]]})
        edited = client.put(
            url,
            json={
                "submitted_by": "Ada Researcher",
                "title": "Study A, second edition",
                "date": "2030-01-01",
            },
        )

        assert [t["tag_name"] for t in tagged.json()["resource"]["tags"]] == ["Books"]
        body = edited.json()["resource"]
        assert body["title"] == "Study A, second edition"
        assert body["date"] == "2024-03-01"
        assert [t["tag_name"] for t in body["tags"]] == ["Books"]

    def test_delete_then_get_is_not_found(self, client):
        resource = submit(client)
        url = f"/admin/resources/{resource['id']}"

        deleted = client.delete(url)
        response = client.get(url)

        assert deleted.status_code == 204
        assert response.status_code == 404
        assert response.json()["detail"]["kind"] == "not_found"


class TestSuggestTags:
    """Tests for the tag suggestion endpoint."""

    def test_no_classifier_output_gives_empty_list(self, client):
        create_taxonomy(client)

        response = client.post(
            "/suggest-tags", json={"title": "Interviews with nurses"}
        )

        assert response.status_code == 200
        assert response.json() == {"suggestions": []}
