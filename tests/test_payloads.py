import pytest

from groupledger.errors import GroupLedgerError, PayloadError
from groupledger.payloads import parse_balances, parse_debt, parse_group


def test_parse_group():
    expenses, members = parse_group({
        "expenses": [{
            "amount": 90,
            "paidBy": "alice",
            "participants": [{"userId": "alice", "amount": 45}, {"userId": "bob", "amount": 45.0}],
            "isSettlement": False,
        }],
        "members": [{"userId": "alice", "userName": "Alice"}, {"userId": "bob"}],
    })

    assert len(expenses) == 1
    assert expenses[0].paid_by == "alice"
    assert [(p.user_id, p.amount) for p in expenses[0].participants] == [("alice", 45), ("bob", 45)]
    assert not expenses[0].is_settlement
    assert [(m.user_id, m.user_name) for m in members] == [("alice", "Alice"), ("bob", "bob")]


def test_parse_group_defaults_to_empty():
    assert parse_group({}) == ([], [])


@pytest.mark.parametrize("body, message", [
    ([], "must be a JSON object"),
    ({"expenses": {}}, "expenses must be a list"),
    ({"expenses": [{"paidBy": "a", "participants": []}]}, "missing 'amount'"),
    ({"expenses": [{"amount": "ten", "paidBy": "a", "participants": []}]}, "amount must be a number"),
    ({"expenses": [{"amount": True, "paidBy": "a", "participants": []}]}, "amount must be a number"),
    ({"expenses": [{"amount": float("nan"), "paidBy": "a", "participants": []}]}, "must be finite"),
    ({"expenses": [{"amount": 1, "paidBy": "", "participants": []}]}, "paidBy must be a non-empty string"),
    ({"expenses": [{"amount": 1, "paidBy": "a", "participants": [{"amount": 1}]}]}, "missing 'userId'"),
    ({"expenses": [{"amount": 1, "paidBy": "a", "participants": [], "isSettlement": "yes"}]}, "boolean"),
    ({"members": [{"userName": "Alice"}]}, "members[0] is missing 'userId'"),
    ({"expenses": [{"amount": 10 ** 400, "paidBy": "a", "participants": []}]}, "amount must be finite"),
    ({"expenses": [{"amount": 10, "paidBy": "a", "splitType": "percent", "participantIds": ["a"]}]}, "splitType must be one of"),
    ({"expenses": [{"amount": 10, "paidBy": "a", "splitType": "equal"}]}, "missing 'participantIds'"),
    ({"expenses": [{"amount": 10, "paidBy": "a", "splitType": "custom", "participantIds": ["a"],
                    "customAmounts": {"a": "ten"}}]}, "customAmounts.a must be a number"),
    ({"members": [{"userId": "a", "userName": 7}]}, "userName must be a string"),
])
def test_parse_group_rejects_bad_bodies(body, message):
    with pytest.raises(PayloadError) as excinfo:
        parse_group(body)
    assert message in str(excinfo.value)


def test_payload_error_is_a_groupledger_error():
    assert issubclass(PayloadError, GroupLedgerError)


def test_parse_balances():
    balances, names = parse_balances({"balances": {"a": 10, "b": -10.5}, "names": {"a": "Alice"}})
    assert balances == {"a": 10.0, "b": -10.5}
    assert names == {"a": "Alice"}


@pytest.mark.parametrize("body", [
    {},
    {"balances": []},
    {"balances": {"a": "1"}},
    {"balances": {"a": 1}, "names": {"a": 2}},
])
def test_parse_balances_rejects_bad_bodies(body):
    with pytest.raises(PayloadError):
        parse_balances(body)


def test_parse_debt():
    debt = parse_debt({"from": "bob", "fromName": "Bob", "to": "alice", "amount": 30})
    assert debt.from_user == "bob"
    assert debt.from_name == "Bob"
    assert debt.to_name == "alice"
    assert debt.amount == 30


@pytest.mark.parametrize("body", [
    {"from": "bob", "to": "alice", "amount": 0},
    {"from": "bob", "to": "bob", "amount": 5},
    {"from": "bob", "amount": 5},
    {"from": "bob", "to": "alice", "amount": 5, "fromName": ["Bob"]},
    {"from": "bob", "to": "alice", "amount": 5, "toName": 3},
    "bob",
])
def test_parse_debt_rejects_bad_bodies(body):
    with pytest.raises(PayloadError):
        parse_debt(body)


def test_parse_expense_from_split_type():
    expenses, _ = parse_group({"expenses": [
        {"amount": 90, "paidBy": "a", "splitType": "equal", "participantIds": ["a", "b", "c"]},
        {"amount": 90, "paidBy": "a", "splitType": "one_owes_all", "participantIds": ["a", "b", "c"]},
        {"amount": 90, "paidBy": "a", "splitType": "custom", "participantIds": ["b", "c"],
         "customAmounts": {"b": 60, "c": 30}},
    ]})

    assert [[(p.user_id, p.amount) for p in e.participants] for e in expenses] == [
        [("a", 30), ("b", 30), ("c", 30)],
        [("b", 45), ("c", 45)],
        [("b", 60), ("c", 30)],
    ]


def test_explicit_participants_win_over_split_type():
    expenses, _ = parse_group({"expenses": [{
        "amount": 10, "paidBy": "a", "splitType": "equal", "participantIds": ["a", "b"],
        "participants": [{"userId": "b", "amount": 10}],
    }]})
    assert [(p.user_id, p.amount) for p in expenses[0].participants] == [("b", 10)]
