# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from authgate.application.services.profile_service import ProfileService
from authgate.interfaces.http.bearer import extract_bearer_token
from authgate.interfaces.http.dto.auth import UserDTO


class ProfileController:
    def __init__(self, *, profile_service: ProfileService, secret: str) -> None:
        self._profile_service = profile_service
        self._secret = secret

    def profile(self) -> tuple[Response, int]:
        token = extract_bearer_token(request.headers.get("Authorization"))
        user = self._profile_service.get_profile(token, self._secret)

        payload = UserDTO(id=user.id, username=user.username).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("profile", __name__, url_prefix="/api")
        bp.add_url_rule("/profile", view_func=self.profile, methods=["GET"])
        return bp
