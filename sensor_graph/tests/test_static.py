from fastapi.testclient import TestClient

from sensor_graph.app import create_app


def test_missing_static_files_are_404(client):
    assert client.get("/").status_code == 404
    assert client.get("/style.css").status_code == 404
    assert client.get("/pkg/graph.js").status_code == 404


def test_static_files_are_served(settings):
    settings.static_dir.mkdir()
    (settings.static_dir / "index.html").write_text("<html>graph</html>")
    (settings.static_dir / "style.css").write_text("body {}")
    settings.pkg_dir.mkdir()
    (settings.pkg_dir / "graph.js").write_text("console.log('hi');")

    client = TestClient(create_app(settings))

    index = client.get("/")
    assert index.status_code == 200
    assert "graph" in index.text
    assert index.headers["content-type"].startswith("text/html")
    assert client.get("/style.css").text == "body {}"
    assert client.get("/pkg/graph.js").text == "console.log('hi');"
    assert client.get("/pkg/missing.js").status_code == 404
