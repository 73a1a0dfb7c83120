from __future__ import annotations

from flask import Flask, request

from ..common.responses import fail, handle_errors, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/uploadProfilePicture", methods=["POST"], endpoint="upload_profile_picture")
    @handle_errors("Failed to upload image")
    def upload_profile_picture():
        image = request.files.get("image")
        if image is None:
            return fail("No image uploaded", 400)
        return ok({"url": container.imgur_client.upload(image.read())})
