SCOPE_CATEGORIES = {
    "scope_creep": "Scope-creep triggers: vague deliverables, unlimited revisions, open-ended timelines",
    "payment": "Weak or missing payment terms",
    "vague_language": "Vague language the client could exploit",
    "missing_protection": "Missing protective clauses: kill fee, IP transfer, termination",
}

# "absent": True means the flag fires when none of the keywords appear
SCOPE_RED_FLAGS = {
    "unlimited_revisions": {
        "title": "Unlimited Revisions",
        "category": "scope_creep",
        "keywords": ["unlimited revision", "unlimited rounds", "until client is satisfied", "until satisfied", "until approval"],
        "absent": False,
        "severity": "high",
        "description": "The contract lets the client request revisions with no ceiling, so the work never has to end.",
        "fix": 'Replace with: "The project includes up to 3 rounds of revisions. Additional revisions will be billed at $X/hour."'
    },
    "vague_revision_count": {
        "title": "Vague Revision Count",
        "category": "scope_creep",
        "keywords": ["reasonable number of revisions", "reasonable revisions", "revisions as needed", "as many revisions"],
        "absent": False,
        "severity": "high",
        "description": 'Language like "reasonable number of revisions" leaves the limit undefined and exposes you to unlimited rework.',
        "fix": 'Replace with: "The project includes up to 3 rounds of revisions. Additional revisions will be billed at $X/hour."'
    },
    "undefined_deliverables": {
        "title": "Undefined Deliverables Scope",
        "category": "scope_creep",
        "keywords": ["all necessary", "related materials", "and other", "as required", "including but not limited to", "any additional"],
        "absent": False,
        "severity": "medium",
        "description": "Deliverables are described open-endedly instead of as a fixed list of file types, formats and quantities.",
        "fix": 'Replace with: "Deliverables include: [exact list with formats and quantities]. No additional assets are included."'
    },
    "open_ended_timeline": {
        "title": "Open-Ended Timeline",
        "category": "scope_creep",
        "keywords": ["ongoing", "as long as needed", "until completion", "no fixed end", "indefinitely"],
        "absent": False,
        "severity": "medium",
        "description": "There is no end date, so the engagement can stretch indefinitely at the same price.",
        "fix": 'Add: "This engagement ends on [date] or upon delivery of the listed deliverables, whichever comes first."'
    },
    "payment_on_completion": {
        "title": "Payment Only Upon Completion",
        "category": "payment",
        "keywords": ["upon completion", "on completion", "after final approval", "upon final delivery"],
        "absent": False,
        "severity": "high",
        "description": 'Payment is tied to "completion" without defining what completion means or who decides it.',
        "fix": 'Add: "Payment schedule: 50% upon kickoff, 25% at midpoint delivery, 25% upon final approval. Net-15 terms apply."'
    },
    "long_payment_terms": {
        "title": "Long Payment Terms",
        "category": "payment",
        "keywords": ["net 60", "net-60", "net 90", "net-90", "within 90 days", "within 60 days"],
        "absent": False,
        "severity": "medium",
        "description": "You wait two to three months after invoicing to get paid, effectively financing the client.",
        "fix": 'Replace with: "Invoices are due Net-15. Late payments accrue 1.5% monthly interest."'
    },
    "missing_payment_dates": {
        "title": "Missing Payment Dates",
        "category": "payment",
        "keywords": ["due on", "due within", "net 15", "net-15", "net 30", "net-30", "deposit", "milestone", "invoice"],
        "absent": True,
        "severity": "high",
        "description": "No payment milestones, due dates or invoicing terms are defined.",
        "fix": 'Add: "Payment schedule: 50% deposit on signing, balance due Net-15 from final delivery."'
    },
    "vague_approval": {
        "title": "Subjective Approval Standard",
        "category": "vague_language",
        "keywords": ["sole discretion", "to client's satisfaction", "satisfactory to client", "as client sees fit", "best efforts"],
        "absent": False,
        "severity": "medium",
        "description": "Acceptance depends on the client's subjective judgment, which can be used to withhold payment.",
        "fix": 'Add: "Deliverables are accepted if they meet the written specification. Silence for 5 business days counts as acceptance."'
    },
    "no_kill_fee": {
        "title": "No Kill Fee",
        "category": "missing_protection",
        "keywords": ["kill fee", "cancellation fee", "cancellation payment"],
        "absent": True,
        "severity": "medium",
        "description": "The client can cancel mid-project without paying for work already done.",
        "fix": 'Add: "If Client cancels after work begins, Client pays 50% of the remaining fee plus all work completed to date."'
    },
    "no_ip_transfer_terms": {
        "title": "IP Transfer Not Tied to Payment",
        "category": "missing_protection",
        "keywords": ["upon full payment", "upon receipt of payment", "license", "intellectual property", "ownership"],
        "absent": True,
        "severity": "medium",
        "description": "The contract is silent on when ownership of the work transfers, so it may pass before you are paid.",
        "fix": 'Add: "All rights in the deliverables transfer to Client upon receipt of full payment."'
    },
    "no_termination_clause": {
        "title": "No Termination Clause",
        "category": "missing_protection",
        "keywords": ["terminate", "termination"],
        "absent": True,
        "severity": "low",
        "description": "Neither party has a defined way to exit the agreement or settle accounts on exit.",
        "fix": 'Add: "Either party may terminate with 14 days written notice. Client pays for all work completed through the termination date."'
    },
}

# Words that suggest the text is a contract or SOW at all
CONTRACT_INDICATORS = [
    "agreement", "contract", "scope of work", "statement of work", "sow",
    "client", "contractor", "freelancer", "deliverable", "payment", "services",
]
