"""
Catalogs of selectable options for the wizard.

This module is the single source of truth for the frameworks, modules and
package managers the wizard offers. Order matters: list indices are what the
wizard's cursors point at, and selected modules are always reported in
catalog order.
"""

from pydantic import BaseModel, ConfigDict, Field


class FrameworkInfo(BaseModel):
    """A framework the new app can be built on."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str = ""
    packages: list[str] = Field(default_factory=list)


class ModuleInfo(BaseModel):
    """An optional integration that can be toggled on."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    short_label: str
    description: str = ""
    env_vars: list[str] = Field(default_factory=list)
    packages: dict[str, list[str]] = Field(default_factory=dict)


class PackageManagerInfo(BaseModel):
    """A JavaScript package manager."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    runner: list[str]
    install: list[str]
    add: list[str]
    dev: list[str]


FRAMEWORKS: list[FrameworkInfo] = [
    FrameworkInfo(
        id="nextjs",
        label="Next.js",
        description="React framework with App Router and Tailwind.",
        packages=[
            "class-variance-authority",
            "clsx",
            "lucide-react",
            "tailwind-merge",
            "tailwindcss-animate",
            "@radix-ui/react-slot",
        ],
    ),
    FrameworkInfo(
        id="expo",
        label="Expo",
        description="Expo app with Router and EAS configuration.",
        packages=[
            "expo-router",
            "expo-font",
            "@expo-google-fonts/geist-mono",
            "tamagui",
            "@tamagui/config",
            "@tamagui/animations-react-native",
            "@tamagui/metro-plugin",
            "@tamagui/babel-plugin",
            "react-native-svg",
        ],
    ),
]

MODULES: list[ModuleInfo] = [
    ModuleInfo(
        id="neon",
        label="Database (Neon)",
        short_label="DB",
        description="Serverless Postgres with Neon.",
        env_vars=["DATABASE_URL"],
        packages={
            "nextjs": ["@neondatabase/serverless"],
            "expo": ["@neondatabase/serverless"],
        },
    ),
    ModuleInfo(
        id="clerk",
        label="Auth (Clerk)",
        short_label="Auth",
        description="Authentication with Clerk.",
        env_vars=["CLERK_PUBLISHABLE_KEY", "CLERK_SECRET_KEY"],
        packages={
            "nextjs": ["@clerk/nextjs"],
            "expo": ["@clerk/clerk-expo"],
        },
    ),
    ModuleInfo(
        id="payload",
        label="CMS (Payload)",
        short_label="CMS",
        description="Headless CMS using Payload.",
        env_vars=["PAYLOAD_SECRET", "DATABASE_URL"],
        packages={
            "nextjs": ["payload"],
            "expo": ["payload"],
        },
    ),
    ModuleInfo(
        id="stripe",
        label="Payments (Stripe)",
        short_label="Payments",
        description="Payments via Stripe SDK.",
        env_vars=["STRIPE_SECRET_KEY", "STRIPE_WEBHOOK_SECRET"],
        packages={
            "nextjs": ["stripe"],
            "expo": ["stripe"],
        },
    ),
    ModuleInfo(
        id="email",
        label="Email",
        short_label="Email",
        description="Transactional email.",
    ),
]

PACKAGE_MANAGERS: list[PackageManagerInfo] = [
    PackageManagerInfo(
        id="npm",
        label="npm",
        runner=["npx"],
        install=["npm", "install"],
        add=["npm", "install"],
        dev=["npm", "run", "dev"],
    ),
    PackageManagerInfo(
        id="pnpm",
        label="pnpm",
        runner=["pnpm", "dlx"],
        install=["pnpm", "install"],
        add=["pnpm", "add"],
        dev=["pnpm", "dev"],
    ),
    PackageManagerInfo(
        id="yarn",
        label="yarn",
        runner=["yarn", "dlx"],
        install=["yarn", "install"],
        add=["yarn", "add"],
        dev=["yarn", "dev"],
    ),
    PackageManagerInfo(
        id="bun",
        label="bun",
        runner=["bunx"],
        install=["bun", "install"],
        add=["bun", "add"],
        dev=["bun", "run", "dev"],
    ),
]

MODULE_IDS: list[str] = [module.id for module in MODULES]

