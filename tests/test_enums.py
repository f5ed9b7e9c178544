import unittest

from steamid.enums import (ACCOUNT_TYPE_CHARS, CHAT_INSTANCES, EAccountType, EAuth, EInstance,
                           EUniverse, EVanityType)


class EnumLookupTest(unittest.TestCase):
    def test_from_value(self):
        self.assertIs(EUniverse.from_value(1), EUniverse.Public)
        self.assertIs(EUniverse.from_value(5), EUniverse.RC)
        self.assertIs(EInstance.from_value(0x80000), EInstance.Clan)
        self.assertIs(EAccountType.from_value(11), EAccountType.Unknown)
        self.assertIs(EAuth.from_value(1), EAuth.Yes)
        self.assertIs(EVanityType.from_value(3), EVanityType.GameGroup)

    def test_from_value_unknown(self):
        self.assertIsNone(EUniverse.from_value(6))
        self.assertIsNone(EInstance.from_value(3))
        self.assertIsNone(EAccountType.from_value(12))
        self.assertIsNone(EAccountType.from_value(None))

    def test_from_index(self):
        self.assertIs(EInstance.from_index(0), EInstance.All)
        self.assertIs(EInstance.from_index(3), EInstance.Web)
        self.assertIs(EInstance.from_index(6), EInstance.MMLobby)
        self.assertIsNone(EInstance.from_index(7))
        self.assertIsNone(EInstance.from_index(-1))
        self.assertIs(EVanityType.from_index(0), EVanityType.Individual)

    def test_instance_values(self):
        self.assertEqual(EInstance.Clan, 0x80000)
        self.assertEqual(EInstance.Lobby, 0x40000)
        self.assertEqual(EInstance.MMLobby, 0x20000)
        self.assertEqual(CHAT_INSTANCES, (EInstance.Clan, EInstance.Lobby, EInstance.MMLobby))


class AccountTypeCharTest(unittest.TestCase):
    def test_chars(self):
        self.assertEqual(EAccountType.Individual.char, 'U')
        self.assertEqual(EAccountType.Clan.char, 'g')
        self.assertEqual(EAccountType.Chat.char, 'T')
        self.assertEqual(EAccountType.AnonGameServer.char, 'A')
        self.assertIsNone(EAccountType.ConsoleUser.char)

    def test_from_char(self):
        for account_type in EAccountType:
            if account_type.char is not None:
                self.assertIs(EAccountType.from_char(account_type.char), account_type)

    def test_from_char_is_case_sensitive(self):
        self.assertIs(EAccountType.from_char('a'), EAccountType.AnonUser)
        self.assertIs(EAccountType.from_char('A'), EAccountType.AnonGameServer)
        self.assertIs(EAccountType.from_char('i'), EAccountType.Unknown)
        self.assertIs(EAccountType.from_char('I'), EAccountType.Invalid)

    def test_chat_chars_are_not_types(self):
        self.assertIsNone(EAccountType.from_char('c'))
        self.assertIsNone(EAccountType.from_char('L'))
        self.assertIn('c', ACCOUNT_TYPE_CHARS)
        self.assertIn('L', ACCOUNT_TYPE_CHARS)


if __name__ == "__main__":
    unittest.main()
