import sys
import os

# Add project root to path
sys.path.append(os.getcwd())

print("Verifying imports...")

try:
    print("Importing app.api.main...")
    from app.api import main
    print("✅ app.api.main imported")

    print("Importing app.api.candidates...")
    from app.api import candidates
    print("✅ app.api.candidates imported")

    print("Importing app.api.resume...")
    from app.api import resume
    print("✅ app.api.resume imported")

    print("Importing app.db.models...")
    from app.db import models
    print("✅ app.db.models imported")

    print("🚀 All imports successful!")

except Exception as e:
    print(f"❌ Import failed: {e}")
    sys.exit(1)
