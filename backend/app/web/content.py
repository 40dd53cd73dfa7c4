# backend/app/web/content.py
"""Marketing copy rendered by the public pages. Nothing here is computed."""

NAV_LINKS = [
    ("Home", "/"),
    ("About", "/about"),
    ("Services", "/services"),
    ("Plans", "/plan"),
    ("Privacy", "/privacy-policy"),
    ("Terms", "/terms"),
]

DASHBOARD_LINKS = [
    ("Dashboard", "/user/dashboard"),
    ("Profile", "/user/profile"),
    ("Wallets", "/user/wallets"),
    ("Deposit / Withdraw", "/user/deposit"),
    ("Transactions", "/user/transactions"),
    ("Secret phrase", "/user/phrase"),
    ("Account", "/user/account"),
]

PLANS = [
    {
        "title": "Starter",
        "range": "$300 - $999",
        "description": "Entry tier for new investors getting familiar with the platform.",
    },
    {
        "title": "Professional",
        "range": "$1,000 - $9,999",
        "description": "Advanced charting tools and priority support.",
    },
    {
        "title": "Enterprise",
        "range": "$10,000+",
        "description": "Institutional account service with a dedicated manager.",
    },
]

SERVICES = [
    {
        "title": "Crypto Asset Management",
        "description": "Custody-aware portfolio tracking across ten supported assets.",
    },
    {
        "title": "Algorithmic Trading Portfolios",
        "description": "Curated strategies presented through the client dashboard.",
    },
    {
        "title": "Market Analysis",
        "description": "Institutional-grade research and live market charts.",
    },
]

FAQS = [
    {
        "question": "What investment solutions does Ttrade Capital provide?",
        "answer": "Ttrade Capital offers diversified investment services including algorithmic "
                  "trading portfolios, crypto asset management and market analysis tools.",
    },
    {
        "question": "How do I start trading on Ttrade Capital?",
        "answer": "Register, sign in, fund your account with one of the supported "
                  "cryptocurrencies and you get access to the dashboard.",
    },
    {
        "question": "What's the minimum deposit to use Ttrade Capital?",
        "answer": "$300 for the Starter tier, $1000 for Professional and $10,000 for Enterprise.",
    },
    {
        "question": "Can I access my portfolio online?",
        "answer": "Yes, the client dashboard shows your balances, wallets and transaction history.",
    },
]
