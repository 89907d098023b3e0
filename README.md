# boursokit

Building blocks for talking to the BoursoBank (formerly Boursorama) customer
site: scraping the account dashboard, translating a password into virtual
keypad keys, reading instrument quotes and historical ticks, and preparing
trading orders.

The package does no networking of its own. It builds the URLs and payloads
the site expects and parses the pages and JSON it returns, so you can plug it
into whatever HTTP client you prefer.

## Installation

```
pip install boursokit
```

## Accounts

```python
from boursokit.accounts import AccountKind, extract_accounts, extract_all_accounts

html = ...  # body of /dashboard/liste-comptes?rumroute=dashboard.new_accounts&_hinclude=1
for account in extract_all_accounts(html):
    print(account.kind, account.name, account.balance / 100, account.bank_name)

savings = extract_accounts(html, AccountKind.SAVINGS)
```

Balances are integers in cents; loans come out negative.

## Logging in with the virtual keypad

```python
from boursokit.virtual_pad import (
    extract_challenge_token,
    extract_data_matrix_keys,
    password_to_virtual_pad_keys,
)

pad_html = ...  # body of /connexion/clavier-virtuel?_hinclude=1
keys = extract_data_matrix_keys(pad_html)
password = "password"
pressed = password_to_virtual_pad_keys(keys, password)
challenge = extract_challenge_token(pad_html)
```

The password must be made only of digits; anything else raises `ValueError`.

## Quotes and ticks

```python
from boursokit.feed import instrument_quote_url, parse_instrument_quote
from boursokit.ticks import ticks_url, parse_ticks

url = ticks_url("1rTCW8", 30, 0)
ticks = parse_ticks(body).d
print(ticks.highest(), ticks.lowest(), ticks.average(), ticks.volume())

quote = parse_instrument_quote(quote_body)
print(quote.last, quote.is_open_at(datetime.now().time()))
```

## Orders

`boursokit.orders.complete_order_data` fills an order from the response of
the prepare endpoint, applying the same defaults the site does (limit price
from the last price, expiration from the offered validity). The URL helpers
`order_prepare_url`, `order_check_url`, `order_confirm_url` and
`cancel_order_url` together with `confirm_payload` and `cancel_payload` give
you everything needed for each step.

## Settings

`boursokit.settings` reads and writes `~/.bourso/settings.json` (customer id
and, optionally, password) and sets up logging to `~/.bourso/bourso.log`.
Account ids can be checked with `boursokit.validate.validate_account_id`.