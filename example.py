from curconv import CurrencyConverter, CurrencyPair, PathStrategy

print(CurrencyConverter.__version__)  # 0.1.0

converter = CurrencyConverter(
    [
        CurrencyPair("USD", "CAD", 1.35),
        CurrencyPair("CHF", "CAD", 1.53),
        CurrencyPair("EUR", "USD", 1.08),
    ]
)

print(converter.currencies())
# => ['CAD', 'CHF', 'EUR', 'USD']

result = converter.rate("EUR", "CHF", trace_steps=True)
print(result.rate)
for step in result.steps:
    print(f"1 {step.left} = {step.value:f} {step.right}")

# Fewest hops instead of the first path found
print(converter.rate("EUR", "CHF", strategy=PathStrategy.BFS).rate)

# Or read pairs from a file
# converter = CurrencyConverter.from_csv("pairs.csv")
