from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from wallpaper_api.catalog import CATEGORIES
from wallpaper_api.server import build_app
from wallpaper_api.settings import AppSettings


class WallpaperApiTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name)
        self.images = self.root / "images"
        self.images.mkdir()
        self.policy = self.root / "privacy_policy.txt"

    def tearDown(self) -> None:
        self._td.cleanup()

    def _client(self, **overrides) -> TestClient:
        settings = AppSettings(
            images_dir=str(self.images),
            privacy_policy_path=str(self.policy),
            **overrides,
        )
        return TestClient(build_app(settings))

    def _fill(self, category: str, *names: str) -> Path:
        folder = self.images / category
        folder.mkdir(exist_ok=True)
        for name in names:
            (folder / name).write_bytes(b"img")
        return folder

    # --- /api/v1/wallpapers/{category}

    def test_lists_category(self) -> None:
        self._fill("nature", "a.jpg", "b.txt", "c.PNG")

        response = self._client().get("/api/v1/wallpapers/nature")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertNotIn("message", body)
        urls = sorted(w["imageUrl"] for w in body["data"])
        self.assertEqual(urls, [
            "http://testserver/images/nature/a.jpg",
            "http://testserver/images/nature/c.PNG",
        ])
        self.assertEqual(sorted(w["id"] for w in body["data"]), [1, 2])

    def test_invalid_category_is_rejected(self) -> None:
        response = self._client().get("/api/v1/wallpapers/space")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {
            "success": False,
            "message": "Invalid category. Use: nature, culture, or digital",
        })

    def test_missing_directory_is_server_error(self) -> None:
        response = self._client().get("/api/v1/wallpapers/digital")

        self.assertEqual(response.status_code, 500)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertTrue(body["message"].startswith("Error loading wallpapers: cannot read directory"))

    def test_empty_directory_returns_empty_data(self) -> None:
        self._fill("culture")

        response = self._client().get("/api/v1/wallpapers/culture")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True, "data": []})

    def test_forwarded_proto_switches_scheme(self) -> None:
        self._fill("nature", "a.jpg")

        response = self._client().get(
            "/api/v1/wallpapers/nature",
            headers={"X-Forwarded-Proto": "https", "Host": "walls.example.com"},
        )

        self.assertEqual(
            response.json()["data"][0]["imageUrl"],
            "https://walls.example.com/images/nature/a.jpg",
        )

    def test_forwarded_proto_is_case_insensitive(self) -> None:
        self._fill("nature", "a.jpg")

        response = self._client().get(
            "/api/v1/wallpapers/nature",
            headers={"X-Forwarded-Proto": "HTTPS"},
        )

        self.assertEqual(
            response.json()["data"][0]["imageUrl"],
            "https://testserver/images/nature/a.jpg",
        )

    def test_forwarded_proto_ignored_when_untrusted(self) -> None:
        self._fill("nature", "a.jpg")

        response = self._client(trust_forwarded_proto=False).get(
            "/api/v1/wallpapers/nature",
            headers={"X-Forwarded-Proto": "https"},
        )

        self.assertEqual(
            response.json()["data"][0]["imageUrl"],
            "http://testserver/images/nature/a.jpg",
        )

    # --- /api/v1/wallpapers/{category}/random

    def test_random_returns_single_entry(self) -> None:
        self._fill("digital", "a.jpg", "b.png", "c.webp")

        response = self._client().get("/api/v1/wallpapers/digital/random")

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(len(data), 1)
        self.assertIn(data[0]["id"], (1, 2, 3))
        self.assertEqual(data[0]["category"], "Digital")

    def test_random_on_empty_category_is_not_found(self) -> None:
        self._fill("digital", "readme.txt")

        response = self._client().get("/api/v1/wallpapers/digital/random")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["message"], "No wallpapers found in this category")

    def test_random_invalid_category(self) -> None:
        response = self._client().get("/api/v1/wallpapers/space/random")
        self.assertEqual(response.status_code, 400)

    def test_random_missing_directory(self) -> None:
        response = self._client().get("/api/v1/wallpapers/nature/random")
        self.assertEqual(response.status_code, 500)

    # --- aggregate + categories

    def test_all_wallpapers_skips_unreadable_categories(self) -> None:
        self._fill("nature", "a.jpg", "b.jpg")
        self._fill("culture", "c.jpg")

        response = self._client().get("/api/v1/wallpapers")

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual([w["category"] for w in data], ["Nature", "Nature", "Culture"])
        self.assertEqual([w["id"] for w in data], [1, 2, 1])

    def test_non_utf8_file_name_does_not_break_listings(self) -> None:
        folder = self._fill("nature", "ok.jpg")
        self._fill("culture", "c.jpg")
        try:
            with open(os.path.join(os.fsencode(folder), b"\xff.jpg"), "wb") as fh:
                fh.write(b"img")
        except OSError:
            self.skipTest("filesystem rejects non-UTF-8 names")
        client = self._client()

        category = client.get("/api/v1/wallpapers/nature")
        everything = client.get("/api/v1/wallpapers")

        self.assertEqual(category.status_code, 200)
        self.assertEqual(
            [w["imageUrl"] for w in category.json()["data"]],
            ["http://testserver/images/nature/ok.jpg"],
        )
        self.assertEqual(everything.status_code, 200)
        self.assertEqual(
            [w["category"] for w in everything.json()["data"]],
            ["Nature", "Culture"],
        )

    def test_categories(self) -> None:
        response = self._client().get("/api/v1/categories")
        self.assertEqual(response.json(), {"success": True, "categories": list(CATEGORIES)})

    # --- privacy policy, health, static files

    def test_privacy_policy_json(self) -> None:
        self.policy.write_text("We collect nothing.", encoding="utf-8")

        response = self._client(privacy_policy_updated="January 1, 2026").get("/api/v1/privacy-policy")

        self.assertEqual(response.json(), {
            "success": True,
            "privacy_policy": "We collect nothing.",
            "last_updated": "January 1, 2026",
        })

    def test_privacy_policy_html_escapes_content(self) -> None:
        self.policy.write_text("Contact <admin@example.com>", encoding="utf-8")

        response = self._client().get("/privacy-policy")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("text/html"))
        self.assertIn("&lt;admin@example.com&gt;", response.text)

    def test_privacy_policy_with_invalid_utf8_is_served(self) -> None:
        self.policy.write_bytes(b"Policy \xff\xfe text")
        client = self._client()

        api = client.get("/api/v1/privacy-policy")
        page = client.get("/privacy-policy")

        self.assertEqual(api.status_code, 200)
        self.assertEqual(api.json()["privacy_policy"], "Policy \ufffd\ufffd text")
        self.assertEqual(page.status_code, 200)
        self.assertIn("Policy \ufffd\ufffd text", page.text)

    def test_privacy_policy_missing(self) -> None:
        client = self._client()
        for path in ("/privacy-policy", "/api/v1/privacy-policy"):
            response = client.get(path)
            self.assertEqual(response.status_code, 500)
            self.assertEqual(response.json(), {"error": "Privacy policy not found"})

    def test_health_reports_uptime(self) -> None:
        client = self._client()
        client.app.state.boot_ts -= 90

        body = client.get("/health").json()

        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["message"], "Wallpaper API is running")
        self.assertGreaterEqual(body["uptime_sec"], 90)

    def test_serves_image_files(self) -> None:
        self._fill("nature", "a.jpg")

        response = self._client().get("/images/nature/a.jpg")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"img")

    def test_cors_allows_any_origin(self) -> None:
        response = self._client().get(
            "/api/v1/categories", headers={"Origin": "http://app.local"}
        )
        self.assertEqual(response.headers["access-control-allow-origin"], "*")

    def test_lifespan_runs(self) -> None:
        with self._client() as client:
            self.assertEqual(client.get("/health").status_code, 200)
            self.assertGreaterEqual(client.get("/health").json()["uptime_sec"], 0)


if __name__ == "__main__":
    unittest.main()
