from flask_wtf import CSRFProtect
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

csrf = CSRFProtect()

# In-memory limiter; switch storage in prod (e.g. redis://)
limiter = Limiter(get_remote_address, storage_uri="memory://")
