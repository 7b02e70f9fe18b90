# stores.py
# Process-local state. Lost on restart; shared by app.py and the tests.

from rate_limit import InMemoryWindowStore

# One window store per rate-limited endpoint (client_key -> ClientWindow)
EXCUSE_WINDOWS = InMemoryWindowStore()
IMAGE_WINDOWS = InMemoryWindowStore()
