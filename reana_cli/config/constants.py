"""
Static tables shared by the commands.
"""

# Path fragments that are never shown in workspace listings
FILES_BLACKLIST = (".git/", "/.git/")

INTERACTIVE_SESSION_TYPES = ["jupyter"]

REANA_COMPUTE_BACKENDS = {
    "kubernetes": "Kubernetes",
    "htcondor": "HTCondor",
    "slurm": "Slurm",
}

LEADING_MARK = "==>"

WORKFLOW_COMPLETED_STATUSES = ["finished", "failed", "stopped"]
WORKFLOW_PROGRESSING_STATUSES = ["created", "running", "queued", "pending"]

# Statuses for which `start --follow` keeps polling
WORKFLOW_FOLLOW_STATUSES = ["pending", "queued", "running"]

DU_MULTI_FILTERS = ["size", "name"]
LIST_MULTI_FILTERS = ["name", "status"]
LOGS_SINGLE_FILTERS = ["compute_backend", "docker_img", "status"]
LOGS_MULTI_FILTERS = ["step"]

QUOTA_REPORTS = ["limit", "usage"]

# option name -> workflow type -> name understood by the workflow engine
AVAILABLE_OPERATIONAL_OPTIONS = {
    "CACHE": {"serial": "CACHE"},
    "FROM": {"serial": "FROM"},
    "TARGET": {"serial": "TARGET", "cwl": "--target"},
    "toplevel": {"yadage": "toplevel"},
    "initdir": {"yadage": "initdir"},
    "initfiles": {"yadage": "initfiles"},
    "accept_metadir": {"yadage": "accept_metadir"},
    "report": {"snakemake": "report"},
}

LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]
DEFAULT_LOG_LEVEL = "WARNING"

# Seconds between two status requests of `start --follow`
DEFAULT_CHECK_INTERVAL = 5


def get_run_statuses(include_deleted: bool = False) -> list[str]:
    """Return every workflow run status, optionally including `deleted`."""
    statuses = WORKFLOW_COMPLETED_STATUSES + WORKFLOW_PROGRESSING_STATUSES
    if include_deleted:
        statuses = statuses + ["deleted"]
    return statuses
