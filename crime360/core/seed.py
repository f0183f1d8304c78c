"""
Built-in seed datasets for the Crime 360 demo.
Two independently numbered city datasets; ids are only unique inside a dataset.
"""

SEED_DATASETS = {
    "mumbai": {
        "incidents": [
            {
                "id": "1",
                "case_number": "FIR001234",
                "type": "Theft",
                "complainant": {
                    "name": "Rajesh Kumar",
                    "age": 35,
                    "address": "Hebbal, bangalore",
                    "phone": "+91-9876543210",
                },
                "accused": {
                    "name": "Unknown suspect",
                    "description": "Male, approximately 25-30 years, wearing dark clothes",
                    "known_aliases": [],
                },
                "status": "Under Investigation",
                "priority": "Medium",
                "date": "2025-01-08",
                "location": {
                    "area": "Malleshwaram",
                    "coordinates": {"lat": 19.1367, "lon": 72.8269},
                    "address": "Malleshwaram Market Area",
                },
                "officer": "Inspector Sharma",
                "description": "Mobile phone stolen from complainant while traveling in local train during rush hour",
                "evidence": ["CCTV footage", "Witness statements", "Mobile phone IMEI"],
                "keywords": ["mobile theft", "train", "rush hour", "andheri"],
                "timestamp": "2025-01-08T10:30:00Z",
            },
            {
                "id": "2",
                "case_number": "FIR001235",
                "type": "Vehicle Theft",
                "complainant": {
                    "name": "Priya Singh",
                    "age": 28,
                    "address": "Belanduru, Bangalore",
                    "phone": "+91-9876543211",
                },
                "accused": {
                    "name": "Rahul Verma",
                    "description": "Male, 32 years, suspicious behavior near parking area",
                    "known_aliases": ["Rahul V", "RV"],
                },
                "status": "Pending",
                "priority": "High",
                "date": "2025-01-07",
                "location": {
                    "area": "Koramangala",
                    "coordinates": {"lat": 19.0596, "lon": 72.8403},
                    "address": "Shopping Mall Parking Lot",
                },
                "officer": "Sub-Inspector Patel",
                "description": "Honda Activa motorcycle stolen from shopping mall parking area, security guard noticed suspicious activity",
                "evidence": ["Security footage", "Parking ticket", "Witness identification"],
                "keywords": ["vehicle theft", "motorcycle", "honda activa", "parking", "mall"],
                "timestamp": "2025-01-07T14:45:00Z",
            },
            {
                "id": "3",
                "case_number": "FIR001236",
                "type": "Fraud",
                "complainant": {
                    "name": "Amit Verma",
                    "age": 42,
                    "address": "Hebbal, Bangalore",
                    "phone": "+91-9876543212",
                },
                "accused": {
                    "name": "Online Scammer",
                    "description": "Operates fake e-commerce website, identity unknown",
                    "known_aliases": ["Tech Fraud Group"],
                },
                "status": "Resolved",
                "priority": "Low",
                "date": "2025-01-06",
                "location": {
                    "area": "MG Road",
                    "coordinates": {"lat": 19.0179, "lon": 72.8424},
                    "address": "Online transaction from home",
                },
                "officer": "Inspector Gupta",
                "description": "Online payment fraud through fake e-commerce website, amount of ₹15,000 debited without delivery",
                "evidence": ["Bank statements", "Website screenshots", "Email communications", "UPI transaction details"],
                "keywords": ["online fraud", "ecommerce", "payment fraud", "cyber crime"],
                "timestamp": "2025-01-06T09:15:00Z",
            },
        ],
        "persons": [
            {
                "id": "face_1",
                "person_id": "CR001",
                "name": "Saurav Singh",
                "aliases": ["Saurav", "SS"],
                "features": [0.1, 0.2, 0.3, 0.4, 0.5],
                "mugshots": ["https://example.com/mugshots/cr001.jpg"],
                "last_seen": "2025-01-05",
                "status": "Wanted",
                "charges": ["Theft", "Assault", "Burglary"],
                "locations": [
                    {
                        "area": "Jaynagar",
                        "coordinates": {"lat": 19.1367, "lon": 72.8269},
                        "timestamp": "2025-01-05T16:20:00Z",
                    }
                ],
                "risk_level": "High",
                "metadata": {
                    "height": "5'8\"",
                    "weight": "70kg",
                    "marks": ["Scar on left cheek"],
                    "tattoos": ["Dragon on right arm"],
                },
            },
            {
                "id": "face_2",
                "person_id": "CR002",
                "name": "Rajesh Kumar",
                "aliases": ["Raj", "RK"],
                "features": [0.6, 0.7, 0.8, 0.9, 1.0],
                "mugshots": ["https://example.com/mugshots/cr002.jpg"],
                "last_seen": "2024-12-20",
                "status": "Convicted",
                "charges": ["Fraud", "Money Laundering", "Identity Theft"],
                "locations": [
                    {
                        "area": "Cubbon Park",
                        "coordinates": {"lat": 19.0596, "lon": 72.8403},
                        "timestamp": "2024-12-20T12:30:00Z",
                    }
                ],
                "risk_level": "Medium",
                "metadata": {
                    "height": "6'0\"",
                    "weight": "80kg",
                    "marks": ["Mole on forehead"],
                    "tattoos": [],
                },
            },
        ],
    },
    "bangalore": {
        "incidents": [
            {
                "id": "1",
                "case_number": "FIRB001234",
                "type": "Theft",
                "complainant": {
                    "name": "Anil Kumar",
                    "age": 35,
                    "address": "Indiranagar, Bangalore",
                    "phone": "+91-9876543210",
                },
                "accused": {
                    "name": "Unknown suspect",
                    "description": "Male, approximately 25-30 years, wearing dark clothes",
                    "known_aliases": [],
                },
                "status": "Under Investigation",
                "priority": "Medium",
                "date": "2025-01-08",
                "location": {
                    "area": "Indiranagar",
                    "coordinates": {"lat": 12.9716, "lon": 77.6413},
                    "address": "Near Indiranagar Metro Station",
                },
                "officer": "Inspector Ramesh",
                "description": "Wallet stolen from complainant near metro station",
                "evidence": ["CCTV footage", "Witness statements"],
                "keywords": ["theft", "wallet", "indiranagar"],
                "timestamp": "2025-01-08T10:30:00Z",
            },
            {
                "id": "2",
                "case_number": "FIRB001235",
                "type": "Vehicle Theft",
                "complainant": {
                    "name": "Priya Reddy",
                    "age": 28,
                    "address": "Koramangala, Bangalore",
                    "phone": "+91-9876543211",
                },
                "accused": {
                    "name": "Rahul Sharma",
                    "description": "Male, 32 years, suspicious behavior near parking area",
                    "known_aliases": ["Rahul S"],
                },
                "status": "Pending",
                "priority": "High",
                "date": "2025-01-07",
                "location": {
                    "area": "Koramangala",
                    "coordinates": {"lat": 12.9352, "lon": 77.6245},
                    "address": "Koramangala Shopping Complex Parking Lot",
                },
                "officer": "Sub-Inspector Patel",
                "description": "Two-wheeler (Hero Splendor) stolen from Koramangala parking area",
                "evidence": ["Security footage", "Parking ticket"],
                "keywords": ["vehicle theft", "two-wheeler", "koramangala"],
                "timestamp": "2025-01-07T14:45:00Z",
            },
            {
                "id": "3",
                "case_number": "FIRB001236",
                "type": "Fraud",
                "complainant": {
                    "name": "Amit Verma",
                    "age": 42,
                    "address": "MG Road, Bangalore",
                    "phone": "+91-9876543212",
                },
                "accused": {
                    "name": "Online Scammer",
                    "description": "Operates fake e-commerce website",
                    "known_aliases": ["Tech Fraud Bangalore"],
                },
                "status": "Resolved",
                "priority": "Low",
                "date": "2025-01-06",
                "location": {
                    "area": "MG Road",
                    "coordinates": {"lat": 12.9718, "lon": 77.5948},
                    "address": "Online transaction from home",
                },
                "officer": "Inspector Gupta",
                "description": "Online payment fraud, ₹20,000 debited without product delivery",
                "evidence": ["Bank statements", "Email communications"],
                "keywords": ["online fraud", "ecommerce", "payment fraud"],
                "timestamp": "2025-01-06T09:15:00Z",
            },
            {
                "id": "4",
                "case_number": "FIRB001237",
                "type": "Assault",
                "complainant": {
                    "name": "Sahana Nair",
                    "age": 29,
                    "address": "Jayanagar, Bangalore",
                    "phone": "+91-9876543213",
                },
                "accused": {
                    "name": "Ravi Kumar",
                    "description": "Male, aggressive behavior near park",
                    "known_aliases": [],
                },
                "status": "Under Investigation",
                "priority": "High",
                "date": "2025-01-09",
                "location": {
                    "area": "Jayanagar",
                    "coordinates": {"lat": 12.9250, "lon": 77.5938},
                    "address": "Near Jayanagar 4th Block Park",
                },
                "officer": "Inspector Mehta",
                "description": "Physical assault during evening walk near park",
                "evidence": ["Witness statements", "Medical reports"],
                "keywords": ["assault", "physical abuse", "jayanagar"],
                "timestamp": "2025-01-09T19:30:00Z",
            },
            {
                "id": "5",
                "case_number": "FIRB001238",
                "type": "Vandalism",
                "complainant": {
                    "name": "Rohit Shetty",
                    "age": 45,
                    "address": "Whitefield, Bangalore",
                    "phone": "+91-9876543214",
                },
                "accused": {
                    "name": "Unknown suspects",
                    "description": "Group of individuals vandalized property at night",
                    "known_aliases": [],
                },
                "status": "Pending",
                "priority": "Medium",
                "date": "2025-01-10",
                "location": {
                    "area": "Whitefield",
                    "coordinates": {"lat": 12.9699, "lon": 77.7500},
                    "address": "Whitefield Industrial Area",
                },
                "officer": "Sub-Inspector Rao",
                "description": "Multiple walls vandalized with spray paint",
                "evidence": ["Photos of vandalism", "Witness testimonies"],
                "keywords": ["vandalism", "property damage", "whitefield"],
                "timestamp": "2025-01-10T02:00:00Z",
            },
        ],
        "persons": [
            {
                "id": "face_1",
                "person_id": "CRB001",
                "name": "Saurav Nair",
                "aliases": ["Saurav", "SN"],
                "features": [0.1, 0.2, 0.3, 0.4, 0.5],
                "mugshots": ["https://example.com/mugshot1.jpg"],
                "last_seen": "2025-01-05",
                "status": "Wanted",
                "charges": ["Theft", "Assault"],
                "locations": [
                    {
                        "area": "Jayanagar",
                        "coordinates": {"lat": 12.9250, "lon": 77.5938},
                        "timestamp": "2025-01-05T16:20:00Z",
                    }
                ],
                "risk_level": "High",
                "metadata": {
                    "height": "5'8\"",
                    "weight": "70kg",
                    "marks": ["Scar on left cheek"],
                    "tattoos": ["Dragon on right arm"],
                },
            },
            {
                "id": "face_2",
                "person_id": "CRB002",
                "name": "Rajesh Kumar",
                "aliases": ["Raj", "RK"],
                "features": [0.6, 0.7, 0.8, 0.9, 1.0],
                "mugshots": ["https://example.com/mugshot2.jpg"],
                "last_seen": "2024-12-20",
                "status": "Convicted",
                "charges": ["Fraud"],
                "locations": [
                    {
                        "area": "MG Road",
                        "coordinates": {"lat": 12.9718, "lon": 77.5948},
                        "timestamp": "2024-12-20T12:30:00Z",
                    }
                ],
                "risk_level": "Medium",
                "metadata": {"height": "6'0\"", "weight": "80kg", "marks": ["Mole on forehead"]},
            },
        ],
    },
}
