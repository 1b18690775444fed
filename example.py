from taiwan_bank_rates import ClientConfig, RateClient, __version__

print(__version__)  # 1.0.0

# Default usage
client = RateClient()

# Every currency on today's sheet
rates = client.get_current_rates()
print(rates[:2])

# A single currency, case-insensitive; None when the sheet has no such row
usd = client.get_current_rates("usd")
print(usd)

# Several currencies, kept in sheet order
print(client.get_current_rates(["USD", "JPY", "EUR"]))

# Daily history, fetched month by month and trimmed to the window
history = client.get_historical_rates("USD", "2025-01-20", "2025-02-05")
print(history[:2])

# Tighter timeouts and a gentler backoff
with RateClient(ClientConfig(timeout_ms=5_000, retry_attempts=2, retry_delay_ms=500)) as fast:
    print(fast.get_current_rates("JPY"))
