"""Allow ``python -m otpcore``."""

from otpcore.cli import main

if __name__ == "__main__":
    main()
