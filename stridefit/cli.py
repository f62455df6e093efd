#!/usr/bin/env python
"""
Command line front end for the StrideFit store companion.

Usage:
    stridefit --help
    stridefit profile setup "Jane Runner" jane@example.com
    stridefit gait terrain=Road pronation=Over injury_history=Shin,Knee
    stridefit catalog --match --category Road
    stridefit cart add brooks-ghost-16 10.5 --qty 2
    stridefit rotation log <instance-id> 6.2
    stridefit privacy wipe
"""

import argparse
import json
import logging
import sys
from typing import Optional

from stridefit.core.logging import configure_logging
from stridefit.data.community import EVENTS, TRAILS
from stridefit.data.inventory import get_shoe
from stridefit.services.cart_ledger import DeliveryMethod
from stridefit.services.factory import Services, create_services
from stridefit.services.gait_quiz import QUESTIONS_BY_ID
from stridefit.services.inventory_filter import ALL, FilterState, parse_facet
from stridefit.services.storage_medium import get_storage_medium
from stridefit.schemas.shoe import Category, CushionLevel, Gender, SupportType

logger = logging.getLogger(__name__)


def show_catalog(services: Services, args) -> int:
    state = FilterState(
        match_mode=args.match,
        category=parse_facet(Category, args.category),
        gender=parse_facet(Gender, args.gender),
        brands=frozenset(args.brand or []),
        support=parse_facet(SupportType, args.support),
        cushion=parse_facet(CushionLevel, args.cushion),
    )
    shoes = services.filters.apply(state)
    gait = services.repository.get_gait_profile()

    print(f"\n=== Inventory ({len(shoes)} shoes) ===")
    for shoe in shoes:
        score = f" [match {services.scorer.score(shoe, gait)}]" if args.match else ""
        pick = " *staff pick*" if shoe.is_staff_pick else ""
        print(f"  {shoe.id:<28} {shoe.full_name:<32} ${shoe.price:>7.2f}  "
              f"{shoe.category.value}/{shoe.support.value}/{shoe.cushion.value}{score}{pick}")
    return 0


def run_gait(services: Services, args) -> int:
    answers = {}
    for pair in args.answers:
        question_id, _, raw = pair.partition("=")
        question = QUESTIONS_BY_ID.get(question_id)
        if question is None:
            print(f"Unknown question: {question_id}")
            return 1
        for value in raw.split(",") if question.is_multi else [raw]:
            answers = services.quiz.select(answers, question_id, value)

    if answers:
        if services.quiz.submit(answers) is None:
            print("Gait analysis requires a local profile (guests cannot save one).")
            return 1

    gait = services.repository.get_gait_profile()
    progress = services.quiz.progress(gait.model_dump(mode="json", exclude_none=True))
    print(f"\nGait profile ({progress.answered}/{progress.total} answered):")
    print(json.dumps(gait.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))
    if progress.next_question:
        q = progress.next_question
        print(f"\nNext: {q.question} ({q.id}=" + "|".join(o.value for o in q.options) + ")")
    return 0


def run_cart(services: Services, args) -> int:
    cart = services.cart

    if args.action == "add":
        if get_shoe(args.shoe_id, services.filters.catalog) is None:
            print(f"Unknown shoe: {args.shoe_id}")
            return 1
        cart.add_item(args.shoe_id, args.size, args.qty)
    elif args.action == "remove":
        cart.remove_item(args.shoe_id, args.size)
    elif args.action == "checkout":
        method = DeliveryMethod.DELIVERY if args.delivery else DeliveryMethod.PICKUP
        order = cart.checkout(services.filters.catalog, method)
        if order is None:
            print("Your cart is empty.")
            return 1
        print(f"\nOrder placed: {order.item_count} items")
        print(f"  Subtotal: ${order.subtotal:.2f}")
        print(f"  {method.value.title()}: ${order.delivery_fee:.2f}")
        print(f"  Total:    ${order.total:.2f}")
        return 0

    items = cart.items()
    print(f"\n=== Cart ({cart.item_count()} items) ===")
    for item in items:
        shoe = get_shoe(item.shoe_id, services.filters.catalog)
        name = shoe.full_name if shoe else item.shoe_id
        print(f"  {name:<32} size {item.size:<5} x{item.quantity}")
    if items:
        print(f"  Subtotal: ${cart.subtotal(services.filters.catalog):.2f}")
    return 0


def run_rotation(services: Services, args) -> int:
    tracker = services.rotation

    if args.action == "add":
        item = tracker.add_shoe(args.ref, name=args.name, threshold=args.threshold)
        if item is None:
            print("Shoe not added (guests cannot track a rotation, custom shoes need --name).")
            return 1
        print(f"Tracking {item.name} as {item.id}")
    elif args.action == "log":
        if tracker.log_miles(args.instance_id, args.miles) is None:
            print("Nothing logged.")
            return 1
    elif args.action == "remove":
        tracker.remove_shoe(args.instance_id)

    print("\n=== Rotation ===")
    for status in tracker.statuses():
        item = status.item
        flag = "  DISCOUNT UNLOCKED" if status.discount_unlocked else ""
        print(f"  {item.id}  {item.name:<32} {item.miles:.1f}/{item.threshold:.0f} mi "
              f"({status.progress:.0%}){flag}")
    return 0


def run_profile(services: Services, args) -> int:
    if args.action == "setup":
        if services.account.create_profile(args.name, args.email) is None:
            print("Both a name and an email are required.")
            return 1
    elif args.action == "guest":
        services.account.continue_as_guest()

    profile = services.repository.get_profile()
    print(json.dumps(profile.model_dump(mode="json", by_alias=True), indent=2))
    return 0


def run_rsvp(services: Services, args) -> int:
    if args.event_id:
        if args.cancel:
            services.repository.remove_rsvp(args.event_id)
        else:
            services.repository.rsvp_event(args.event_id)

    rsvps = services.repository.get_rsvps()
    print("\n=== Group Runs ===")
    for event in EVENTS:
        going = "  [going]" if event.id in rsvps else ""
        print(f"  {event.id:<22} {event.day} {event.time}  {event.title} @ {event.location}{going}")
    return 0


def run_privacy(services: Services, args) -> int:
    if args.action == "wipe":
        services.store.wipe()
        print("All local data wiped.")
        return 0

    audit = services.repository.get_privacy_audit()
    print(f"Storage used: {audit.storage_used}")
    print(json.dumps(services.store.raw_data(), indent=2))
    return 0


def run_intent(services: Services, args) -> int:
    if args.command == "call":
        print(services.intents.dial_store())
        return 0

    if args.trail_id is None:
        for trail in TRAILS:
            print(f"  {trail.id:<22} {trail.name} ({trail.type}, {trail.distance}) {trail.status.value}")
        return 0
    uri = services.intents.directions_to_trail(args.trail_id)
    if uri is None:
        print(f"Unknown trail: {args.trail_id}")
        return 1
    print(uri)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stridefit", description="StrideFit running store companion")
    parser.add_argument("--log-level", help="Override LOG_LEVEL")
    parser.add_argument("--memory", action="store_true", help="Use a throwaway in-memory store")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Catalog command
    catalog_parser = subparsers.add_parser("catalog", help="Browse the inventory")
    catalog_parser.add_argument("--match", action="store_true", help="Only shoes matching your gait profile")
    catalog_parser.add_argument("--category", default=ALL, choices=[ALL] + [c.value for c in Category])
    catalog_parser.add_argument("--gender", default=ALL, choices=[ALL] + [g.value for g in Gender])
    catalog_parser.add_argument("--brand", action="append", help="Brand to include (repeatable)")
    catalog_parser.add_argument("--support", default=ALL, choices=[ALL] + [s.value for s in SupportType])
    catalog_parser.add_argument("--cushion", default=ALL, choices=[ALL] + [c.value for c in CushionLevel])

    # Gait command
    gait_parser = subparsers.add_parser("gait", help="Answer gait analysis questions")
    gait_parser.add_argument("answers", nargs="*", help="question=value pairs, comma separated for multi choice")

    # Cart command
    cart_parser = subparsers.add_parser("cart", help="Manage the shopping cart")
    cart_sub = cart_parser.add_subparsers(dest="action")
    cart_sub.add_parser("list", help="Show the cart")
    cart_add = cart_sub.add_parser("add", help="Add a shoe")
    cart_add.add_argument("shoe_id")
    cart_add.add_argument("size", type=float)
    cart_add.add_argument("--qty", type=int, default=1)
    cart_remove = cart_sub.add_parser("remove", help="Remove a shoe/size line")
    cart_remove.add_argument("shoe_id")
    cart_remove.add_argument("size", type=float)
    cart_checkout = cart_sub.add_parser("checkout", help="Place the order")
    cart_checkout.add_argument("--delivery", action="store_true", help="Local delivery instead of pickup")

    # Rotation command
    rotation_parser = subparsers.add_parser("rotation", help="Track shoe mileage")
    rotation_sub = rotation_parser.add_subparsers(dest="action")
    rotation_sub.add_parser("list", help="Show the rotation")
    rotation_add = rotation_sub.add_parser("add", help="Track a catalog shoe id or 'custom'")
    rotation_add.add_argument("ref")
    rotation_add.add_argument("--name")
    rotation_add.add_argument("--threshold", type=float)
    rotation_log = rotation_sub.add_parser("log", help="Log a run")
    rotation_log.add_argument("instance_id")
    rotation_log.add_argument("miles", type=float)
    rotation_remove = rotation_sub.add_parser("remove", help="Stop tracking a shoe")
    rotation_remove.add_argument("instance_id")

    # Profile command
    profile_parser = subparsers.add_parser("profile", help="Local profile")
    profile_sub = profile_parser.add_subparsers(dest="action")
    profile_sub.add_parser("show", help="Show the profile")
    profile_setup = profile_sub.add_parser("setup", help="Create a local member profile")
    profile_setup.add_argument("name")
    profile_setup.add_argument("email")
    profile_sub.add_parser("guest", help="Continue as a guest")

    # Community commands
    rsvp_parser = subparsers.add_parser("rsvp", help="List or RSVP to group runs")
    rsvp_parser.add_argument("event_id", nargs="?")
    rsvp_parser.add_argument("--cancel", action="store_true")
    subparsers.add_parser("call", help="Call the store")
    directions_parser = subparsers.add_parser("directions", help="Directions to a local trail")
    directions_parser.add_argument("trail_id", nargs="?")

    # Privacy command
    privacy_parser = subparsers.add_parser("privacy", help="Inspect or wipe local data")
    privacy_parser.add_argument("action", nargs="?", default="show", choices=["show", "wipe"])

    return parser


COMMANDS = {
    "catalog": show_catalog,
    "gait": run_gait,
    "cart": run_cart,
    "rotation": run_rotation,
    "profile": run_profile,
    "rsvp": run_rsvp,
    "call": run_intent,
    "directions": run_intent,
    "privacy": run_privacy,
}


def main(argv: Optional[list[str]] = None, services: Optional[Services] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    if services is None:
        services = create_services(get_storage_medium("memory") if args.memory else None)
    return handler(services, args)


if __name__ == "__main__":
    sys.exit(main())
