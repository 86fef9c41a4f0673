# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Tests for the users request builder.
"""

import pytest

from tests.conftest import FakeTransport
from wpapi import UsersRequest, WPRequest
from wpapi.errors import UnsupportedMethodError


class TestUsersConstructor:

    def test_creates_a_users_request(self) -> None:
        users = UsersRequest()
        assert isinstance(users, UsersRequest)
        assert isinstance(users, WPRequest)

    def test_keeps_passed_in_options(self) -> None:
        users = UsersRequest({"booleanProp": True, "strProp": "Some string"})
        assert users._options["booleanProp"] is True
        assert users._options["strProp"] == "Some string"

    def test_defaults_options_to_empty_mapping(self) -> None:
        assert UsersRequest()._options == {}

    def test_initializes_instance_state(self) -> None:
        users = UsersRequest()
        assert users._id is None
        assert "|".join(sorted(users._supported_methods)) == "get|head|post"


class TestUsersRequestUri:

    @pytest.fixture
    def users(self) -> UsersRequest:
        return UsersRequest({"endpoint": "/wp-json/"})

    def test_all_users(self, users: UsersRequest) -> None:
        assert users.generate_request_uri() == "/wp-json/users"

    def test_current_user(self, users: UsersRequest) -> None:
        assert users.me().generate_request_uri() == "/wp-json/users/me"

    def test_specific_user(self, users: UsersRequest) -> None:
        assert users.id(1337).generate_request_uri() == "/wp-json/users/1337"

    def test_me_and_id_replace_each_other(self, users: UsersRequest) -> None:
        assert users.id(1337).me().generate_request_uri() == "/wp-json/users/me"
        assert users.me().id(42).generate_request_uri() == "/wp-json/users/42"


class TestUsersVerbs:

    async def test_post_creates_a_user(self, transport: FakeTransport) -> None:
        transport.respond(status_code=201, body={"id": 9, "username": "jo"})
        users = UsersRequest(
            {"endpoint": "/wp-json", "username": "admin", "password": "pw"}, transport
        )

        result = await users.post({"username": "jo"})

        assert result == {"id": 9, "username": "jo"}
        assert transport.last_request.url == "/wp-json/users"

    def test_delete_is_rejected(self, transport: FakeTransport) -> None:
        with pytest.raises(UnsupportedMethodError) as exc_info:
            UsersRequest({"endpoint": "/wp-json"}, transport).me().delete()

        assert exc_info.value.supported_methods == ["head", "get", "post"]
        assert transport.requests == []
