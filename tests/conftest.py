import os
import tempfile

# keep test runs quiet and out of the working tree
os.environ.setdefault("SIM_LOG_CONSOLE", "False")
os.environ.setdefault("SIM_LOG_FILE", os.path.join(tempfile.gettempdir(), "simulator-tests.log"))
os.environ.setdefault("SIM_FORM_STORE", os.path.join(tempfile.gettempdir(), "simulator-tests-form.json"))
