import os
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from app import create_app

SEARCH_DATA = """<add>
  <doc>
    <field name="name">Widget</field>
    <field name="url">classWidget.html</field>
  </doc>
</add>
"""


class ApiTestCase(unittest.TestCase):
    """Runs the app against a temporary config file."""

    config_text = ""

    def setUp(self) -> None:
        self._orig = os.environ.get("DOCWIKI_CONFIG")
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

        config_path = self.root / "docwiki.yaml"
        config_path.write_text(self.config_text.format(root=self.root), encoding="utf-8")
        os.environ["DOCWIKI_CONFIG"] = str(config_path)

    def tearDown(self) -> None:
        os.environ.pop("DOCWIKI_CONFIG", None)
        if self._orig is not None:
            os.environ["DOCWIKI_CONFIG"] = self._orig
        self._tmp.cleanup()


class TestRenderApi(ApiTestCase):
    config_text = "debug_level: WARNING\nproxy_root: /wiki\n"

    def test_render_markup(self) -> None:
        with TestClient(create_app()) as client:
            resp = client.post("/api/v1/render", json={"markup": "See [FrontPage].\n\nBye"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json()["html"],
            '<p>\n  See <a href="/wiki/view/FrontPage">Front Page</a>.\n</p>\n\n\n<p>\n  Bye\n</p>\n',
        )

    def test_render_requires_markup(self) -> None:
        with TestClient(create_app()) as client:
            resp = client.post("/api/v1/render", json={})
        self.assertEqual(resp.status_code, 422)

    def test_doclink_without_index(self) -> None:
        with TestClient(create_app()) as client:
            resp = client.get("/api/v1/doclink", params={"project": "core", "entity": "Widget"})

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json(),
            {"project": "core", "entity": "Widget", "url": "/doc/core/html/index.html"},
        )

    def test_doclink_requires_project(self) -> None:
        with TestClient(create_app()) as client:
            resp = client.get("/api/v1/doclink", params={"project": "  ", "entity": "Widget"})
        self.assertEqual(resp.status_code, 400)

    def test_health(self) -> None:
        with TestClient(create_app()) as client:
            resp = client.get("/api/v1/health")

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["proxy_root"], "/wiki")
        self.assertEqual(body["wrap_width"], 80)
        self.assertEqual(body["doc_projects"], [])
        self.assertTrue(body["doc_index_ready"])
        self.assertIsNone(body["startup_error"])


class TestProjectIndexApi(ApiTestCase):
    config_text = "debug_level: WARNING\ndoc_project_index: {root}/projectIndex.xml\n"

    def setUp(self) -> None:
        super().setUp()
        (self.root / "searchdata.xml").write_text(SEARCH_DATA, encoding="utf-8")
        (self.root / "projectIndex.xml").write_text(
            '<projects><project name="core"><searchdata>searchdata.xml</searchdata></project></projects>',
            encoding="utf-8",
        )

    def test_doc_links_resolve_through_index(self) -> None:
        with TestClient(create_app()) as client:
            doclink = client.get("/api/v1/doclink", params={"project": "core", "entity": "Widget"})
            render = client.post("/api/v1/render", json={"markup": "[doc:core:Widget]"})
            health = client.get("/api/v1/health")

        self.assertEqual(doclink.json()["url"], "/doc/core/html/classWidget.html")
        self.assertEqual(
            render.json()["html"],
            '<p>\n  <a href="/doc/core/html/classWidget.html">Widget</a>\n</p>\n',
        )
        self.assertEqual(health.json()["doc_projects"], ["core"])


class TestBrokenProjectIndexApi(ApiTestCase):
    config_text = "debug_level: WARNING\ndoc_project_index: {root}/projectIndex.xml\n"

    def setUp(self) -> None:
        super().setUp()
        (self.root / "projectIndex.xml").write_text("<projects>", encoding="utf-8")

    def test_startup_error_is_reported(self) -> None:
        with TestClient(create_app()) as client:
            render = client.post("/api/v1/render", json={"markup": "text"})
            health = client.get("/api/v1/health")

        self.assertEqual(render.status_code, 503)
        self.assertIn("Startup failed", render.json()["detail"])
        self.assertEqual(health.status_code, 200)
        self.assertIsNotNone(health.json()["startup_error"])


if __name__ == "__main__":
    unittest.main()
