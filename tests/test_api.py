import io
import zipfile

from branding.transforms import AssetGenerationError
from conftest import decode, png_bytes, truncated_png


URL = "/api/generate-assets"


def _post(client, data=None, mimetype="image/png", **fields):
    form = {"backgroundColor": "#FF3B30", "includeSplash": "true", "appName": "Demo"}
    form.update(fields)
    if data is not None:
        form["file"] = (io.BytesIO(data), "logo.png", mimetype)
    return client.post(URL, data=form, content_type="multipart/form-data")


def test_end_to_end(client):
    resp = _post(client, png_bytes((1200, 1200), (10, 200, 30), mode="RGB"))
    assert resp.status_code == 200
    assert resp.mimetype == "application/zip"
    assert "attachment" in resp.headers["Content-Disposition"]
    assert "expo-assets.zip" in resp.headers["Content-Disposition"]

    with zipfile.ZipFile(io.BytesIO(resp.data)) as zf:
        pngs = [n for n in zf.namelist() if n.startswith("assets/branding/")]
        assert len(pngs) == 6
        for name in pngs:
            assert zf.read(name)
        assert decode(zf.read("assets/branding/splash.png")).size == (1242, 2436)

        snippet = zf.read("app.json.snippet").decode("utf-8")
        assert snippet.count('"backgroundColor": "#FF3B30"') == 2
        assert '"name": "Demo"' in snippet
        assert "README.txt" in zf.namelist()


def test_without_splash(client):
    resp = _post(client, png_bytes((1024, 1024)), includeSplash="false")
    assert resp.status_code == 200
    with zipfile.ZipFile(io.BytesIO(resp.data)) as zf:
        assert "assets/branding/splash.png" not in zf.namelist()


def test_default_app_name(client):
    resp = _post(client, png_bytes((1024, 1024)), appName="")
    with zipfile.ZipFile(io.BytesIO(resp.data)) as zf:
        assert '"name": "My App"' in zf.read("app.json.snippet").decode("utf-8")


def test_missing_file(client):
    resp = _post(client)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No file provided"}


def test_bad_color(client):
    resp = _post(client, png_bytes(), backgroundColor="red")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid background color format"


def test_wrong_type(client):
    resp = _post(client, png_bytes(), mimetype="image/jpeg")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "File must be a PNG image"


def test_oversized_file_is_413(client):
    data = png_bytes((1024, 1024))
    data += b"\0" * (5 * 1024 * 1024 + 1 - len(data))
    resp = _post(client, data)
    assert resp.status_code == 413
    assert resp.get_json()["error"] == "File size exceeds 5MB limit (5.00MB)"


def test_request_body_over_limit(app, client):
    app.config["MAX_CONTENT_LENGTH"] = 1024
    resp = _post(client, png_bytes((1024, 1024)))
    assert resp.status_code == 413
    assert resp.get_json()["error"] == "Request body is too large or invalid"


def test_color_with_trailing_newline(client):
    resp = _post(client, png_bytes((1024, 1024)), backgroundColor="#0066FF\n")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Invalid background color format"


def test_truncated_png_is_client_error(client):
    resp = _post(client, truncated_png())
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Invalid or corrupted PNG file"}


def test_non_square(client):
    resp = _post(client, png_bytes((1023, 1024)))
    assert resp.status_code == 400
    assert "1023x1024" in resp.get_json()["error"]


def test_generation_failure_is_500(client, monkeypatch):
    def boom(*args, **kwargs):
        raise AssetGenerationError("codec exploded")

    monkeypatch.setattr("assetgen.routes.assets.generate", boom)
    resp = _post(client, png_bytes((1024, 1024)))
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Failed to process image assets"}


def test_unexpected_error_does_not_leak(app, monkeypatch):
    app.config["PROPAGATE_EXCEPTIONS"] = False

    def boom(*args, **kwargs):
        raise RuntimeError("secret internals")

    monkeypatch.setattr("assetgen.routes.assets.build_archive", boom)
    resp = _post(app.test_client(), png_bytes((1024, 1024)))
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "An unexpected error occurred. Please try again."}
    assert b"secret" not in resp.data


def test_index_renders_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b'name="backgroundColor"' in resp.data
    assert b"/api/generate-assets" in resp.data


def test_healthz(client):
    assert client.get("/healthz").data == b"ok"
