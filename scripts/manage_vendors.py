# scripts/manage_vendors.py
"""Operator tasks with no public HTTP route.

    python -m scripts.manage_vendors --list
    python -m scripts.manage_vendors --delete-vendor <vendor_id>
    python -m scripts.manage_vendors --delete-rating <rating_id>
    python -m scripts.manage_vendors --recompute
    python -m scripts.manage_vendors --purge-sessions
"""
import argparse
import asyncio
import sys

from app.db import async_session
from app.crud import rating as rating_crud
from app.crud import vendor as vendor_crud
from app.crud.vendor_session import purge_expired_sessions
from app.services.rating_aggregator import recompute_all

if sys.platform.startswith('win') and sys.version_info < (3, 10):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


async def list_vendors():
    async with async_session() as session:
        vendors = await vendor_crud.list_vendors(session)
        if not vendors:
            print("⚠️  No vendors registered.")
        for v in vendors:
            print(f"{v.id}  {v.vendor_name:<30} {v.email:<30} ★ {v.avg_rating} ({v.total_reviews})")


async def delete_vendor(vendor_id):
    async with async_session() as session:
        vendor = await vendor_crud.delete_vendor(session, vendor_id)
        if vendor:
            print(f"🗑️  Deleted vendor {vendor.vendor_name} with its products and ratings")
        else:
            print(f"⚠️  No vendor found with id: {vendor_id}")


async def delete_rating(rating_id):
    async with async_session() as session:
        rating = await rating_crud.delete_rating(session, rating_id)
        if rating:
            print(f"🗑️  Deleted rating {rating_id}; vendor {rating.vendor_id} aggregate recomputed")
        else:
            print(f"⚠️  No rating found with id: {rating_id}")


async def recompute():
    async with async_session() as session:
        changed = await recompute_all(session)
        await session.commit()
        print(f"✅ Recomputed aggregates; {changed} vendor(s) corrected.")


async def purge_sessions():
    async with async_session() as session:
        removed = await purge_expired_sessions(session)
        print(f"✅ Removed {removed} expired session(s).")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Manage marketplace vendors")
    parser.add_argument("--list", action="store_true", help="List vendors with their rating aggregate")
    parser.add_argument("--delete-vendor", type=str, metavar="ID", help="Delete a vendor and everything it owns")
    parser.add_argument("--delete-rating", type=str, metavar="ID", help="Delete a rating and recompute its vendor")
    parser.add_argument("--recompute", action="store_true", help="Rebuild every vendor's rating aggregate")
    parser.add_argument("--purge-sessions", action="store_true", help="Drop expired login sessions")

    args = parser.parse_args()

    if args.list:
        asyncio.run(list_vendors())
    elif args.delete_vendor:
        asyncio.run(delete_vendor(args.delete_vendor))
    elif args.delete_rating:
        asyncio.run(delete_rating(args.delete_rating))
    elif args.recompute:
        asyncio.run(recompute())
    elif args.purge_sessions:
        asyncio.run(purge_sessions())
    else:
        parser.print_help()
