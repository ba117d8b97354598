"""Example: drive the ledger through the service layer (no Flask).

Controllers are a thin layer; the rules live in AttendanceLedger.
"""

from attendance_ledger.container import build_container
from attendance_ledger.core.exceptions import NotAuthorized, NotRegistered


def main():
    container = build_container(admin_identity="0xA")
    ledger = container.ledger

    ledger.register_participant("0xB", "Bob")
    ledger.mark_own_attendance("0xB", 1700000000)
    print("same day:", ledger.check_attendance("0xB", 1700003600))

    ledger.modify_attendance("0xA", "0xB", 1700000000, False)
    print("after override:", ledger.check_attendance("0xB", 1700000000))

    try:
        ledger.evict_user("0xC", "0xB")
    except NotAuthorized as e:
        print("0xC:", e.code)

    ledger.evict_user("0xA", "0xB")
    try:
        ledger.mark_own_attendance("0xB", 1700000000)
    except NotRegistered as e:
        print("0xB after eviction:", e.code)


if __name__ == "__main__":
    main()
