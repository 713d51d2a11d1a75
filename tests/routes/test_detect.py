from io import BytesIO

import numpy as np
from fastapi.testclient import TestClient
from PIL import Image

from tests.conftest import make_test_image, striped_array


class TestDetectPost:
    def test_detect_striped_image(self, client: TestClient) -> None:
        response = client.post(
            "/detect",
            files={"file": ("screen.png", make_test_image(striped_array(200, 100)), "image/png")},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["imageSize"] == {"width": 200, "height": 100}
        assert data["regions"] == [
            {"left": 0, "top": 0, "right": 100, "bottom": 100, "confidence": 0.7},
            {"left": 100, "top": 0, "right": 200, "bottom": 100, "confidence": 0.7},
        ]
        assert data["largest"] == data["regions"][0]

    def test_detect_no_bubbles(self, client: TestClient) -> None:
        white = np.full((100, 100, 3), 255, dtype=np.uint8)
        response = client.post(
            "/detect",
            files={"file": ("screen.jpg", make_test_image(white, fmt="JPEG"), "image/jpeg")},
        )

        assert response.status_code == 200
        assert response.json()["regions"] == []
        assert response.json()["largest"] is None

    def test_reject_invalid_content_type(self, client: TestClient) -> None:
        response = client.post(
            "/detect",
            files={"file": ("test.txt", BytesIO(b"text"), "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "UNSUPPORTED_TYPE"

    def test_reject_undecodable_image(self, client: TestClient) -> None:
        response = client.post(
            "/detect",
            files={"file": ("broken.png", BytesIO(b"not a png"), "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "INVALID_IMAGE"

    def test_reject_oversized_file(self, client: TestClient) -> None:
        large_content = b"x" * (10 * 1024 * 1024 + 1)  # 10MB + 1 byte
        response = client.post(
            "/detect",
            files={"file": ("large.png", BytesIO(large_content), "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "FILE_TOO_LARGE"

    def test_reject_too_many_pixels(self, client: TestClient) -> None:
        buf = BytesIO()
        Image.new("1", (2000, 2000)).save(buf, format="PNG")  # 4M > 3M pixels
        buf.seek(0)
        response = client.post(
            "/detect",
            files={"file": ("huge.png", buf, "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "IMAGE_TOO_LARGE"

    def test_reject_decompression_bomb(self, client: TestClient) -> None:
        buf = BytesIO()
        Image.new("1", (20000, 9000)).save(buf, format="PNG")
        buf.seek(0)
        response = client.post(
            "/detect",
            files={"file": ("bomb.png", buf, "image/png")},
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "IMAGE_TOO_LARGE"


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}
