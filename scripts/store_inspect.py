"""Print the candidate records held in a submissions data file.

Usage:
  python scripts/store_inspect.py [path/to/form-submissions.json ...]

Without arguments the DATA_FILE from config (or .env) is inspected.
"""

import os
import sys

# Ensure project root is on sys.path when running from scripts/ or other cwd
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from config import Config
from hiredash.errors import StorageFailure
from hiredash.models.candidate import availability_of, experience_count
from hiredash.services.submissions import SubmissionStore


def inspect(path, out=sys.stdout):
    print(f"\n=== {path} ===", file=out)
    if not os.path.exists(path):
        print("missing", file=out)
        return 0
    try:
        records = SubmissionStore(path).list()
    except StorageFailure as e:
        print('error:', e, file=out)
        return 0
    for c in records:
        if not isinstance(c, dict):
            continue
        avail = ", ".join(availability_of(c)) or "N/A"
        print(f"{c.get('id')}  {c.get('name')!r}  [{avail}]  experiences={experience_count(c)}  reason={c.get('reason')!r}", file=out)
    print(f"{len(records)} records", file=out)
    return len(records)


def main(argv=None):
    paths = (argv if argv is not None else sys.argv[1:]) or [Config.DATA_FILE]
    for p in paths:
        inspect(p)
    print('\nDone.')


if __name__ == '__main__':
    main()
