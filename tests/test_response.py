# tests/test_response.py

from core.response import ErrorCode, Response


def test_succeed_defaults():
    response = Response.succeed(data={"record": 1})

    assert response.success
    assert response.error is None
    assert response.status_code == 200
    assert response.data == {"record": 1}
    assert str(response) == "Success: "


def test_fail_defaults():
    response = Response.fail("Nope.", ErrorCode.DUPLICATE_NAME)

    assert not response.success
    assert response.status_code == 400
    assert response.data == {}
    assert str(response) == "Error: DUPLICATE_NAME"
