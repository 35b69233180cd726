"""
modalpha — Console Demo
=======================
Run:  python examples/demo_cipher.py [KEY [MESSAGE]] [-v]

Encrypts MESSAGE with KEY, decrypts it back and prints both.
Missing KEY / MESSAGE are asked for interactively. Any validation
error is printed exactly as the cipher reports it.
"""

import sys, os, argparse, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from modalpha import ModAlphaCipher, CipherError

LINE = "═" * 70


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def fail(message):
    print(f"  ✗  {message}")


def run(key: str, message: str) -> int:
    header("Modified-Alphabet Cipher")
    try:
        cipher = ModAlphaCipher(key)
        ct = cipher.encrypt(message)
        pt = cipher.decrypt(ct)
    except CipherError as e:
        fail(e)
        print(LINE + "\n")
        return 1
    ok("Key",       key.upper())
    ok("Encrypted", ct)
    ok("Decrypted", pt)
    print(LINE + "\n")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Modified-alphabet cipher demo")
    parser.add_argument("key", nargs="?", help="keyword, Russian letters only")
    parser.add_argument("message", nargs="?", help="text to encrypt")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=' %(name)s: %(message)s')

    key = args.key if args.key is not None else input("Key: ")
    message = args.message if args.message is not None else input("Message: ")
    return run(key, message)


if __name__ == "__main__":
    sys.exit(main())
