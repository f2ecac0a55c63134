#!/usr/bin/env python3
"""
Page Helper Example Runner

Opens Chromium, binds a sample page object to the bundled test page (or any
page with the same form) and prints what its accessors read.

Usage:
    python run_example_page.py [--url URL] [--first-name NAME] [--car MODEL] [--headed]

Examples:
    python run_example_page.py
    python run_example_page.py --first-name Finley --car Toyota
    python run_example_page.py --url http://localhost:8000/test.html --headed
"""

import sys
import logging
import argparse
from pathlib import Path

# Get the backend directory path
SCRIPT_DIR = Path(__file__).parent.resolve()
BACKEND_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(BACKEND_DIR / "app"))

from playwright.sync_api import sync_playwright

from page_helper import (
    BasePage,
    PageHelperError,
    PlaywrightDriver,
    get_config,
    direct_url,
    expected_title,
    expected_element,
    text_field,
    select_list,
    checkbox,
    button,
    table,
    row
)

DEFAULT_URL = (BACKEND_DIR / "tests" / "fixtures" / "test.html").as_uri()


class ExamplePage(BasePage):
    url = direct_url(DEFAULT_URL)
    ready = expected_element("text_field", name="firstname", timeout=10)
    title = expected_title("HTML Document Title")

    first_name = text_field(name="firstname")
    cars = select_list(name="cars")
    agree = checkbox(name="agree")
    submit = button(value="Submit")
    results = table(id="myTable")
    first_result = row(parent="results")


def run_example(url: str, first_name: str, car: str, headless: bool) -> bool:
    """
    Fill in the example form and print what the page reads back.

    Returns:
        True if the page loaded and every value read back as written
    """
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        try:
            driver = PlaywrightDriver(browser.new_page())

            if url == DEFAULT_URL:
                page = ExamplePage(driver, visit=True)
            else:
                driver.navigate(url)
                page = ExamplePage(driver)

            page.first_name(first_name)
            page.cars(car)
            page.check_agree()
            page.submit()

            print(f"\nPage:         {page.forward('title')}")
            print(f"First name:   {page.first_name()}")
            print(f"Car:          {page.cars()}")
            print(f"Agreed:       {page.agree_checked()}")
            print(f"First result: {page.first_result()}")

            return page.first_name() == first_name and page.cars_selected(car)
        finally:
            browser.close()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Drive the example page object in Chromium"
    )
    parser.add_argument(
        "--url", "-u",
        default=DEFAULT_URL,
        help="Page to open (default: the bundled tests/fixtures/test.html)"
    )
    parser.add_argument(
        "--first-name", "-n",
        default="Finley",
        help="Value typed into the first name field"
    )
    parser.add_argument(
        "--car", "-c",
        default="Mazda",
        help="Option chosen in the car select list"
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window (default follows PAGE_HELPER_HEADLESS)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log page helper activity at DEBUG level"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    headless = get_config().default_headless and not args.headed

    try:
        if run_example(args.url, args.first_name, args.car, headless):
            sys.exit(0)
        else:
            sys.exit(1)
    except PageHelperError as e:
        print(f"\nPage did not load as declared: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
