# src/gitlog/template.py
"""Output template requested from ``git log`` and the sentinels framing it.

Each commit is printed as one self-describing record::

    SEPARATOR HASH:<H> <h> DELIMITER TREE:<T> <t> DELIMITER ... BODY:<b>

TAG comes before SUBJECT and BODY because subject and body text is
unbounded and must close the record.
"""

HASH_FIELD = "HASH"
TREE_FIELD = "TREE"
AUTHOR_FIELD = "AUTHOR"
COMMITTER_FIELD = "COMMITTER"
SUBJECT_FIELD = "SUBJECT"
BODY_FIELD = "BODY"
TAG_FIELD = "TAG"

HASH_FORMAT = HASH_FIELD + ":%H %h"
TREE_FORMAT = TREE_FIELD + ":%T %t"
AUTHOR_FORMAT = AUTHOR_FIELD + ":%an<%ae>[%at]"
COMMITTER_FORMAT = COMMITTER_FIELD + ":%cn<%ce>[%ct]"
SUBJECT_FORMAT = SUBJECT_FIELD + ":%s"
BODY_FORMAT = BODY_FIELD + ":%b"
TAG_FORMAT = TAG_FIELD + ":%D"

SEPARATOR = "@@__GIT_LOG_SEPARATOR__@@"
DELIMITER = "@@__GIT_LOG_DELIMITER__@@"

LOG_FORMAT = SEPARATOR + DELIMITER.join([
    HASH_FORMAT,
    TREE_FORMAT,
    AUTHOR_FORMAT,
    COMMITTER_FORMAT,
    TAG_FORMAT,
    SUBJECT_FORMAT,
    BODY_FORMAT,
])

# The quotes are passed through to git verbatim and end up in the output;
# the BODY decoder strips them again.
PRETTY_ARG = f'--pretty="{LOG_FORMAT}"'
NO_DECORATE_ARG = "--no-decorate"
