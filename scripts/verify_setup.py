#!/usr/bin/env python3
"""Verify configuration and connectivity against the live Circle API.

Read-only: lists wallet sets and fetches the entity public key, never
creates anything.
"""

import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

# Colors for output
GREEN = "\033[92m"
RED = "\033[91m"
YELLOW = "\033[93m"
RESET = "\033[0m"
CHECK = "✓"
CROSS = "✗"
WARN = "⚠"


def print_status(name: str, success: bool, message: str = ""):
    """Print status with color."""
    if success:
        print(f"  {GREEN}{CHECK}{RESET} {name}" + (f" - {message}" if message else ""))
    else:
        print(f"  {RED}{CROSS}{RESET} {name}" + (f" - {message}" if message else ""))


def print_warning(name: str, message: str = ""):
    """Print warning."""
    print(f"  {YELLOW}{WARN}{RESET} {name}" + (f" - {message}" if message else ""))


def test_config():
    """Test configuration."""
    print("\n⚙️ Testing Configuration...")

    try:
        from walletdesk.config import get_settings

        settings = get_settings()
        safe = settings.get_safe_dict()

        print_status("Load settings", True)
        print_status("Circle API key", True, safe["circle"]["api_key"])
        print_status("Circle base URL", True, settings.circle_base_url)

        if not settings.circle_api_key.startswith("TEST_API_KEY") and settings.testnet:
            print_warning("Testnet", "TESTNET mode with a non-test API key")

        return True
    except Exception as e:
        print_status("Configuration", False, str(e))
        return False


def test_imports():
    """Test all critical imports."""
    print("\n📚 Testing Critical Imports...")

    modules = [
        ("walletdesk.main", "Main application"),
        ("walletdesk.circle.factory", "Circle client factory"),
        ("walletdesk.api.app", "FastAPI application"),
        ("walletdesk.web.pages", "Pages"),
    ]

    all_ok = True
    for module, description in modules:
        try:
            __import__(module)
            print_status(description, True)
        except Exception as e:
            print_status(description, False, str(e))
            all_ok = False

    return all_ok


async def test_circle():
    """Test Circle API access with the configured credentials."""
    print("\n🔗 Testing Circle API...")

    try:
        from walletdesk.circle.factory import get_circle_client, server_context

        with server_context():
            sdk = get_circle_client()

        async with sdk:
            response = await sdk.list_wallet_sets()
            wallet_sets = (response.get("data") or {}).get("walletSets") or []
            print_status("List wallet sets", True, f"{len(wallet_sets)} found")

            await sdk.generate_entity_secret_ciphertext()
            print_status("Entity secret ciphertext", True)

        return True
    except Exception as e:
        print_status("Circle API", False, str(e))
        return False


async def main():
    """Run all verification tests."""
    print("=" * 60)
    print("     WALLETDESK SETUP VERIFICATION")
    print("=" * 60)

    results = {}

    results["config"] = test_config()
    results["imports"] = test_imports()
    if results["config"]:
        results["circle"] = await test_circle()

    # Summary
    print("\n" + "=" * 60)
    print("     SUMMARY")
    print("=" * 60)

    passed = sum(1 for v in results.values() if v)
    total = len(results)

    for name, success in results.items():
        status = f"{GREEN}{CHECK}{RESET}" if success else f"{RED}{CROSS}{RESET}"
        print(f"  {status} {name.replace('_', ' ').title()}")

    print()
    if passed == total:
        print(f"  {GREEN}All {total} checks passed!{RESET}")
        return 0
    else:
        print(f"  {YELLOW}{passed}/{total} checks passed{RESET}")
        return 1


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
