"""GraphQL queries for the Compound subgraph."""


class CompoundQueries:
    """GraphQL query definitions for the Compound subgraph."""

    # User cToken balances plus protocol-wide market state
    ACCOUNT_CTOKENS_QUERY = """
    query GetCompoundData($user: String!) {
        accountCTokens(where: { account: $user }) {
            id
            symbol
            supplyBalanceUnderlying
            market {
                symbol
                name
                supplyRate
                borrowRate
                totalSupply
                totalBorrows
                exchangeRate
                underlyingDecimals
            }
        }
        markets {
            symbol
            name
            supplyRate
            borrowRate
            totalSupply
            totalBorrows
            exchangeRate
            underlyingDecimals
            lastUpdateBlockNumber
        }
    }
    """
