"""
Unit Tests - Command Line Front End
"""
import pytest

from stridefit.cli import main
from stridefit.services.factory import create_services
from stridefit.services.storage_medium import MemoryStorageMedium


@pytest.fixture
def services(small_catalog):
    opened = []
    services = create_services(MemoryStorageMedium(), small_catalog, launcher=opened.append)
    services.opened = opened
    return services


def run(services, *argv) -> int:
    return main(list(argv), services=services)


class TestCli:
    def test_no_command_prints_help(self, services, capsys):
        assert run(services) == 1
        assert "usage" in capsys.readouterr().out

    def test_profile_setup_then_gait_then_match(self, services, capsys):
        assert run(services, "profile", "setup", "Jane", "jane@example.com") == 0
        assert run(services, "gait", "terrain=Road", "pronation=Neutral",
                   "cushion_pref=Balanced", "drop_pref=Medium") == 0
        capsys.readouterr()

        assert run(services, "catalog", "--match") == 0

        out = capsys.readouterr().out
        assert "shoe-a" in out
        assert "[match 8]" in out
        assert "shoe-b" not in out

    def test_guest_gait_is_refused(self, services):
        run(services, "profile", "guest")
        assert run(services, "gait", "terrain=Road") == 1

    def test_unknown_gait_question(self, services):
        assert run(services, "gait", "shoe_size=10") == 1

    def test_cart_flow(self, services, capsys):
        assert run(services, "cart", "add", "shoe-a", "9", "--qty", "2") == 0
        assert run(services, "cart", "add", "nope", "9") == 1
        assert services.cart.item_count() == 2
        capsys.readouterr()

        assert run(services, "cart", "checkout", "--delivery") == 0

        out = capsys.readouterr().out
        assert "Total:    $285.00" in out
        assert services.cart.items() == []

    def test_rotation_flow(self, services, capsys):
        run(services, "profile", "setup", "Jane", "jane@example.com")
        assert run(services, "rotation", "add", "shoe-a", "--threshold", "10") == 0
        instance_id = services.rotation.items()[0].id

        assert run(services, "rotation", "log", instance_id, "12") == 0
        assert run(services, "rotation", "log", instance_id, "-3") == 1
        assert "DISCOUNT UNLOCKED" in capsys.readouterr().out

    def test_rsvp_and_wipe(self, services):
        assert run(services, "rsvp", "evt-tuesday-club") == 0
        assert services.repository.get_rsvps() == ["evt-tuesday-club"]

        assert run(services, "privacy", "wipe") == 0
        assert services.repository.get_rsvps() == []

    def test_call_and_directions(self, services):
        assert run(services, "call") == 0
        assert run(services, "directions", "trail-chippewa") == 0
        assert run(services, "directions", "trail-nowhere") == 1
        assert services.opened == [
            "tel:3307255918",
            "maps://?daddr=Chippewa%20Inlet%20Trail%20Medina%2C%20OH",
        ]
