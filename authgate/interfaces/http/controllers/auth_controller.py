# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authgate.application.services.auth_service import AuthService
from authgate.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginResponseDTO,
    RegisterRequestDTO,
    UserDTO,
)
from authgate.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(self, *, auth_service: AuthService, secret: str) -> None:
        self._auth_service = auth_service
        self._secret = secret

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._auth_service.register(dto.username, dto.password)

        payload = UserDTO(id=user.id, username=user.username).model_dump()
        return jsonify(payload), 200

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._auth_service.login(dto.username, dto.password, self._secret)

        payload = LoginResponseDTO(access_token=result.access_token).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
