"""End-to-end tests for the `accounts add-user` command.

Each test runs the Typer application against a file-backed SQLite database
created in a temporary directory.
"""

from sqlalchemy.exc import OperationalError

from src.accounts.cli import app

USER_DATA = {
    "first-name": "chuck",
    "last-name": "norris",
}


def assert_user_created(fetch_users):
    """The user was saved with exactly the given names."""
    users = fetch_users()

    assert len(users) == 1
    assert users[0].id is not None
    assert users[0].first_name == USER_DATA["first-name"]
    assert users[0].last_name == USER_DATA["last-name"]


class TestCreateUserNonInteractive:
    def test_create_user(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", *USER_DATA.values()])

        assert result.exit_code == 0, result.output
        assert "User was successfully created: chuck norris" in result.output
        assert "Interactive Wizard" not in result.output
        assert_user_created(fetch_users)

    def test_verbose_reports_id_and_timing(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", *USER_DATA.values(), "-v"])

        assert result.exit_code == 0, result.output
        assert "New user database id: 1" in result.output
        assert "Elapsed time:" in result.output
        assert "Consumed memory:" in result.output

    def test_default_verbosity_has_no_report(self, runner, initialized_database):
        result = runner.invoke(app, ["add-user", *USER_DATA.values()])

        assert result.exit_code == 0, result.output
        assert "New user database id" not in result.output

    def test_quiet_prints_nothing_on_success(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", *USER_DATA.values(), "-q"])

        assert result.exit_code == 0
        assert "successfully created" not in result.output
        assert_user_created(fetch_users)


class TestCreateUserInteractive:
    def test_create_user(self, runner, initialized_database, fetch_users):
        result = runner.invoke(
            app,
            ["add-user"],
            # responses given to the questions asked for the missing arguments
            input="\n".join(USER_DATA.values()) + "\n",
        )

        assert result.exit_code == 0, result.output
        assert "Add User Command Interactive Wizard" in result.output
        assert "First name" in result.output
        assert "Last name" in result.output
        assert_user_created(fetch_users)

    def test_only_missing_argument_is_asked(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", "chuck"], input="norris\n")

        assert result.exit_code == 0, result.output
        assert " > First name: chuck" in result.output
        assert_user_created(fetch_users)

    def test_invalid_answers_are_asked_again(self, runner, initialized_database, fetch_users):
        result = runner.invoke(
            app,
            ["add-user"],
            input="\nchuck\nn0rris\nnorris\n",
        )

        assert result.exit_code == 0, result.output
        assert "can not be empty" in result.output
        assert "must contain only letters" in result.output
        assert_user_created(fetch_users)

    def test_quiet_still_shows_questions(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", "-q"], input="chuck\nnorris\n")

        assert result.exit_code == 0, result.output
        assert "First name" in result.output
        assert "Last name" in result.output
        assert "successfully created" not in result.output
        assert_user_created(fetch_users)

    def test_no_interaction_does_not_prompt(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", "chuck", "--no-interaction"])

        assert result.exit_code == 1
        assert "Interactive Wizard" not in result.output
        assert "can not be empty" in result.output
        assert fetch_users() == []


class TestCreateUserFailures:
    def test_duplicate_first_name_is_rejected(self, runner, initialized_database, fetch_users):
        first = runner.invoke(app, ["add-user", "chuck", "norris"])
        second = runner.invoke(app, ["add-user", "chuck", "berry"])

        assert first.exit_code == 0, first.output
        assert second.exit_code == 1
        assert 'There is already a user registered with the "chuck" first name.' in second.output
        assert_user_created(fetch_users)

    def test_running_twice_leaves_one_record(self, runner, initialized_database, fetch_users):
        results = [runner.invoke(app, ["add-user", *USER_DATA.values()]) for _ in range(2)]

        assert [r.exit_code for r in results] == [0, 1]
        assert_user_created(fetch_users)

    def test_malformed_argument_is_rejected(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", "chuck", "n0rris"])

        assert result.exit_code == 1
        assert "must contain only letters" in result.output
        assert fetch_users() == []

    def test_blank_argument_is_rejected(self, runner, initialized_database, fetch_users):
        result = runner.invoke(app, ["add-user", "chuck", "   "])

        assert result.exit_code == 1
        assert "can not be empty" in result.output
        assert fetch_users() == []

    def test_persistence_errors_propagate(self, runner, cli_config):
        # No tables were created for this database
        result = runner.invoke(app, ["add-user", *USER_DATA.values()])

        assert result.exit_code == 1
        assert isinstance(result.exception, OperationalError)
