import unittest

from mtsblog.core.exceptions import HashingError
from mtsblog.core.security import BCRYPT_MAX_PASSWORD_BYTES, PasswordHasher


class TestPasswordHasher(unittest.TestCase):
    def setUp(self):
        self.hasher = PasswordHasher(rounds=4)

    def test_hash_is_not_plaintext(self):
        hashed = self.hasher.hash("secret")
        self.assertNotEqual(hashed, "secret")
        self.assertTrue(hashed.startswith("$2b$04$"))

    def test_hash_is_salted(self):
        self.assertNotEqual(self.hasher.hash("secret"), self.hasher.hash("secret"))

    def test_verify_matches_only_original_password(self):
        hashed = self.hasher.hash("secret")
        self.assertTrue(self.hasher.verify("secret", hashed))
        self.assertFalse(self.hasher.verify("wrong", hashed))
        self.assertFalse(self.hasher.verify("", hashed))

    def test_unicode_passwords(self):
        hashed = self.hasher.hash("pässwörd")
        self.assertTrue(self.hasher.verify("pässwörd", hashed))

    def test_overlong_password_cannot_be_hashed(self):
        with self.assertRaises(HashingError):
            self.hasher.hash("x" * (BCRYPT_MAX_PASSWORD_BYTES + 1))

    def test_overlong_password_never_verifies(self):
        hashed = self.hasher.hash("x" * BCRYPT_MAX_PASSWORD_BYTES)
        self.assertFalse(
            self.hasher.verify("x" * (BCRYPT_MAX_PASSWORD_BYTES + 1), hashed)
        )

    def test_malformed_stored_hash_raises(self):
        with self.assertRaises(HashingError):
            self.hasher.verify("secret", "not-a-bcrypt-hash")


if __name__ == "__main__":
    unittest.main()
