"""Entry point for the chef-menu Textual app."""

from __future__ import annotations

from chef_menu.menu_app import ChefMenuApp


def main() -> None:
    ChefMenuApp().run()


if __name__ == "__main__":
    main()
