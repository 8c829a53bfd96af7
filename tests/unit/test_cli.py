"""
Unit tests for the admin CLI
"""

import pytest
from userhub import cli
from userhub.models.user import UserRole


class TestParser:

    def test_create_user_defaults_to_admin(self):
        args = cli.build_parser().parse_args(
            ["create-user", "--name", "Root", "--email", "root@userhub.io", "--password", "secret1"]
        )

        assert args.command == "create-user"
        assert args.role == "admin"
        assert args.password == "secret1"

    def test_issue_token(self):
        args = cli.build_parser().parse_args(["issue-token", "--email", "root@userhub.io"])

        assert args.command == "issue-token"
        assert args.email == "root@userhub.io"

    def test_rejects_unknown_role(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(
                ["create-user", "--name", "Root", "--email", "root@userhub.io", "--role", "owner"]
            )

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


@pytest.mark.asyncio
class TestCreateUserCommand:

    async def test_invalid_input_is_rejected_before_touching_the_database(self, capsys):
        code = await cli.create_user("Root", "not-an-email", "123", UserRole.ADMIN)

        assert code == 1
        out = capsys.readouterr().out
        assert "Invalid email format" in out
        assert "Password must be at least 6 characters" in out
