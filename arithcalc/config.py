"""Settings for the interactive shell, overridable via ARITHCALC_* environment variables"""
import os

LOG_LEVEL = os.getenv("ARITHCALC_LOG_LEVEL", "WARNING")
PROMPT = os.getenv("ARITHCALC_PROMPT", "Enter an arithmetic expression (or type 'exit' to quit): ")
SHOW_POSTFIX = os.getenv("ARITHCALC_SHOW_POSTFIX", "true").lower() == "true"
EXIT_COMMAND = "exit"
