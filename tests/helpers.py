ANN_ADDRESS = "0xaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa"
BEE_ADDRESS = "0xbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"
CAL_ADDRESS = "0xcccccccccccccccccccccccccccccccccccccccc"
ADMIN_ADDRESS = "0x9876543210fedcba9876543210fedcba98765432"

# Seeded demo principals
JOHN_ADDRESS = "0x1234567890abcdef1234567890abcdef12345678"
SARAH_ADDRESS = "0x2345678901abcdef2345678901abcdef23456789"
CHEN_ADDRESS = "0x3456789012abcdef3456789012abcdef34567890"
WILLIAMS_ADDRESS = "0x4567890123abcdef4567890123abcdef45678901"
GARCIA_ADDRESS = "0x5678901234abcdef5678901234abcdef56789012"


def patient_headers(address: str = ANN_ADDRESS) -> dict:
    return {"X-Wallet-Address": address, "X-User-Role": "patient"}


def doctor_headers(address: str = BEE_ADDRESS) -> dict:
    return {"X-Wallet-Address": address, "X-User-Role": "doctor"}
