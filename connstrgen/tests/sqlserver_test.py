"""
Test the SQL Server key/value connection string builder.
"""

import pytest

from connstrgen.dialect.sqlserver import SqlServerConnectionString


def _entries(conn_str):
    """Split a rendered connection string into a set of 'key=value' entries."""
    rendered = conn_str.build()
    return set(rendered.split(";")) if rendered else set()


def test_empty():
    assert SqlServerConnectionString().build() == ""
    assert str(SqlServerConnectionString()) == ""


def test_dangerously_set_parameter():
    conn_str = SqlServerConnectionString().dangerously_set_parameter("Key", "Value")
    assert conn_str.build() == "Key=Value"

    conn_str = conn_str.dangerously_set_parameter("Key", " Value")
    assert conn_str.build() == 'Key=" Value"'

    # keys are never quoted
    conn_str = SqlServerConnectionString().dangerously_set_parameter(" Key ", "v")
    assert conn_str.build() == " Key =v"


def test_set_username():
    conn_str = SqlServerConnectionString().set_username_without_password("User")
    assert conn_str.build() == "user=User"

    conn_str = conn_str.set_username_and_password("User1", "Pwd")
    assert conn_str.build() in ("user=User1;password=Pwd", "password=Pwd;user=User1")
    assert conn_str.parameters == {"user": "User1", "password": "Pwd"}

    # replacing the username implicitly deletes the password
    conn_str = conn_str.set_username_without_password("User2")
    assert conn_str.build() == "user=User2"


def test_set_host():
    conn_str = SqlServerConnectionString().set_host_with_default_port("Host")
    assert conn_str.build() == "server=Host"

    conn_str = conn_str.set_host_with_port("Host1", 80)
    assert conn_str.build() == "server=Host1,80"

    conn_str = conn_str.set_host_with_default_port("Host2")
    assert conn_str.build() == "server=Host2"

    # host and port are quoted as one value
    conn_str = conn_str.set_host_with_port(" Host3", 1433)
    assert conn_str.build() == 'server=" Host3,1433"'


def test_enable_encryption():
    conn_str = SqlServerConnectionString().enable_encryption()
    assert conn_str.build() == "encrypt=true"


def test_enable_encryption_and_trust_server_certificate():
    conn_str = SqlServerConnectionString().enable_encryption_and_trust_server_certificate()
    assert _entries(conn_str) == {"encrypt=true", "trustServerCertificate=true"}


def test_set_database_name():
    conn_str = SqlServerConnectionString().set_database_name("DbName")
    assert conn_str.build() == "database=DbName"

    conn_str = conn_str.set_database_name("Db;Name")
    assert conn_str.build() == 'database="Db;Name"'


def test_set_connect_timeout():
    conn_str = SqlServerConnectionString()

    # negative value => ignored
    conn_str = conn_str.set_connect_timeout(-2)
    assert conn_str.build() == ""

    conn_str = conn_str.set_connect_timeout(30)
    assert conn_str.build() == "timeout=30"

    conn_str = conn_str.set_connect_timeout(-2)
    assert conn_str.build() == "timeout=30"

    conn_str = conn_str.set_connect_timeout(0)
    assert conn_str.build() == "timeout=0"


def test_set_command_timeout():
    conn_str = SqlServerConnectionString()

    conn_str = conn_str.set_command_timeout(-2)
    assert conn_str.build() == ""

    conn_str = conn_str.set_command_timeout(30)
    assert conn_str.build() == "command timeout=30"

    conn_str = conn_str.set_command_timeout(-2)
    assert conn_str.build() == "command timeout=30"


def test_set_connect_retry_count():
    conn_str = SqlServerConnectionString().set_connect_retry_count(0)
    assert conn_str.build() == "connectRetryCount=0"

    conn_str = conn_str.set_connect_retry_count(255)
    assert conn_str.build() == "connectRetryCount=255"


@pytest.mark.parametrize("interval, expected", [(0, 1), (1, 1), (30, 30), (60, 60), (61, 60), (255, 60)])
def test_set_connect_retry_interval(interval, expected):
    conn_str = SqlServerConnectionString().set_connect_retry_interval(interval)
    assert conn_str.build() == f"connectRetryInterval={expected}"


def test_setters_do_not_mutate():
    base = SqlServerConnectionString().set_username_and_password("User", "Pwd")
    base.set_username_without_password("Other")

    assert base.parameters == {"user": "User", "password": "Pwd"}


def test_parameters_are_not_shared_between_instances():
    first = SqlServerConnectionString().set_connect_timeout(30)
    second = first.set_database_name("db")

    assert first.parameters is not second.parameters
    with pytest.raises(TypeError):
        second.parameters["user"] = "x;y"
    assert first.build() == "timeout=30"


def test_raw_parameters_cannot_bypass_quoting():
    raw = {"user": "x;y"}
    with pytest.raises(TypeError):
        SqlServerConnectionString(parameters=raw)

    conn_str = SqlServerConnectionString().dangerously_set_parameter("user", "x")
    raw["user"] = "x;y"
    assert conn_str.build() == "user=x"


def test_repr_hides_password():
    conn_str = SqlServerConnectionString().set_username_and_password("sa", "s3cret")
    assert "s3cret" not in repr(conn_str)
    assert "'user': 'sa'" in repr(conn_str)
    assert "password=s3cret" in _entries(conn_str)


def test_hashable():
    conn_str = SqlServerConnectionString().set_database_name("db")
    assert isinstance(hash(conn_str), int)
    assert conn_str == SqlServerConnectionString().set_database_name("db")
    assert conn_str != SqlServerConnectionString().set_database_name("other")


def test_all_together():
    conn_str = (SqlServerConnectionString()
                .set_username_and_password("sa", "p w d ")
                .set_host_with_port("localhost", 1433)
                .set_database_name("db_name")
                .set_connect_timeout(30)
                .set_command_timeout(60)
                .set_connect_retry_count(3)
                .set_connect_retry_interval(10)
                .enable_encryption_and_trust_server_certificate())

    assert _entries(conn_str) == {
        "user=sa",
        'password="p w d "',
        "server=localhost,1433",
        "database=db_name",
        "timeout=30",
        "command timeout=60",
        "connectRetryCount=3",
        "connectRetryInterval=10",
        "encrypt=true",
        "trustServerCertificate=true",
    }


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main([__file__, "-v"]))
