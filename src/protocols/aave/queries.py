"""GraphQL queries for the Aave V3 subgraph."""


class AaveQueries:
    """GraphQL query definitions for the Aave V3 subgraph."""

    # User aToken balances plus protocol-wide reserve state
    USER_RESERVES_QUERY = """
    query GetAaveData($user: String!) {
        userReserves(where: { user: $user }) {
            id
            currentATokenBalance
            currentStableDebt
            currentVariableDebt
            liquidityRate
            reserve {
                symbol
                name
                decimals
                liquidityRate
                variableBorrowRate
                aToken {
                    id
                }
            }
        }
        reserves {
            symbol
            name
            liquidityRate
            variableBorrowRate
            totalLiquidity
            availableLiquidity
            utilizationRate
            lastUpdateTimestamp
        }
    }
    """
