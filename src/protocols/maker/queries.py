"""GraphQL queries for the Maker protocol subgraph."""


class MakerQueries:
    """GraphQL query definitions for the Maker protocol subgraph."""

    # User DSR balance and the most recent DSR update
    SAVINGS_QUERY = """
    query GetMakerData($user: String!) {
        user(id: $user) {
            id
            savingsBalance
        }
        potDsrUpdates(orderBy: timestamp, orderDirection: desc, first: 1) {
            dsr
            timestamp
        }
    }
    """
