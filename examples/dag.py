"""Sample declaration file for a small REST service.

Show it:
    dagrun -f examples/dag.py -s
    dagrun -f examples/dag.py -s -o json

Run the api and everything it needs:
    dagrun -f examples/dag.py -r restapi
"""

dep("restapi", "db", "cache")
dep("db", "network")
dep("cache", "network")
dep("smoke", "restapi")

prog("network", "echo", "creating network")
prog("db", "echo", "starting db")
prog("cache", "echo", "starting cache")
prog("restapi", """
set -e
echo "building api"
echo "starting api"
""")
prog("smoke", "echo", "smoke test passed")
