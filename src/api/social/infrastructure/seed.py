"""Demonstration data loaded at startup.

Four profiles, each with two screeches, inserted through the repository so
they receive the same ID allocation and timestamps as live data. On an
empty repository the profiles get IDs 1-4 and the screeches IDs 1-8.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from infrastructure.observability import DefaultStartupProbe
from shared_kernel.auth import PasswordHasher
from social.domain.value_objects import NewUserProfile

if TYPE_CHECKING:
    from infrastructure.observability import StartupProbe
    from social.ports.repositories import IUserDataRepository


@dataclass(frozen=True)
class SeedProfile:
    user_name: str
    password: str
    first_name: str
    last_name: str
    profile_image: str
    screeches: tuple[str, ...]


DEMO_PROFILES: tuple[SeedProfile, ...] = (
    SeedProfile(
        user_name="iamyourfather",
        password="Password1",
        first_name="Anakin",
        last_name="Skywalker",
        profile_image="https://lumiere-a.akamaihd.net/v1/images/Darth-Vader_6bda9114.jpeg?region=0%2C23%2C1400%2C785&width=600",
        screeches=(
            "This is Anakin's first screech.",
            "This is Anakin's second screech.",
        ),
    ),
    SeedProfile(
        user_name="chewy",
        password="Password2",
        first_name="Han",
        last_name="Solo",
        profile_image="https://static.wikia.nocookie.net/starwars/images/0/01/Hansoloprofile.jpg/revision/latest?cb=20100129155042",
        screeches=(
            "This is Han's first screech.",
            "This is Han's second screech.",
        ),
    ),
    SeedProfile(
        user_name="merc44",
        password="Password3",
        first_name="Lewis",
        last_name="Hamilton",
        profile_image="https://www.topgear.com/sites/default/files/images/news-article/carousel/2020/11/cdfa20172ebb83b9e2191625850c1f63/m252101.jpg?w=211&h=119",
        screeches=(
            "This is Lewis' first screech.",
            "This is Lewis' second screech.",
        ),
    ),
    SeedProfile(
        user_name="redbull33",
        password="Password4",
        first_name="Max",
        last_name="Verstappen",
        profile_image="https://static01.nyt.com/images/2022/01/10/sports/10sp-dhabi-longer-inyt/merlin_199158756_22a0ff44-86fb-4536-a052-0b0e020e816e-jumbo.jpg?quality=75&auto=webp",
        screeches=(
            "This is Max's first screech.",
            "This is Max's second screech.",
        ),
    ),
)


async def seed_demo_data(
    repository: IUserDataRepository,
    password_hasher: PasswordHasher,
    probe: StartupProbe | None = None,
    profiles: tuple[SeedProfile, ...] = DEMO_PROFILES,
) -> None:
    """Insert the demonstration profiles and their screeches.

    Profiles whose user name is already taken are skipped along with their
    screeches.

    Args:
        repository: Repository to populate
        password_hasher: Hasher applied to each seed password
        probe: Optional startup probe
        profiles: Profiles to insert (the demo set by default)
    """
    probe = probe or DefaultStartupProbe()
    profile_count = 0
    screech_count = 0

    for seed in profiles:
        if await repository.profile_exists_by_name(seed.user_name):
            probe.seed_profile_skipped(seed.user_name)
            continue

        profile = await repository.add_profile(
            NewUserProfile(
                user_name=seed.user_name,
                password_hash=password_hasher.hash(seed.password),
                first_name=seed.first_name,
                last_name=seed.last_name,
                profile_image=seed.profile_image,
            )
        )
        if profile is None:
            probe.seed_profile_skipped(seed.user_name)
            continue
        profile_count += 1

        for content in seed.screeches:
            if await repository.add_screech(profile.id, content) is not None:
                screech_count += 1

    probe.demo_data_seeded(profile_count=profile_count, screech_count=screech_count)
