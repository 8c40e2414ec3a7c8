"""
Bundled product catalog.

Prices are in Indian rupees. Ids are stable: the model answers with these
ids, so never renumber existing entries.
"""

PRODUCTS = [
    {
        "id": 1,
        "name": "Nimbus Air 14 Laptop",
        "category": "Laptops",
        "price": 54990,
        "description": "Thin and light 14-inch laptop with a Ryzen 5 processor, 16GB RAM and a 512GB SSD. All-day battery for students and office work.",
    },
    {
        "id": 2,
        "name": "Vertex Pro 16 Laptop",
        "category": "Laptops",
        "price": 124990,
        "description": "16-inch creator laptop with an RTX 4060 GPU, 32GB RAM and a colour-accurate 2.5K display for video editing and gaming.",
    },
    {
        "id": 3,
        "name": "Orbit Chromebook 11",
        "category": "Laptops",
        "price": 21499,
        "description": "Budget 11.6-inch Chromebook for browsing, school assignments and video calls.",
    },
    {
        "id": 4,
        "name": "Pulse X5 Smartphone",
        "category": "Smartphones",
        "price": 18999,
        "description": "6.6-inch AMOLED phone with a 50MP camera, 5000mAh battery and 5G support.",
    },
    {
        "id": 5,
        "name": "Pulse Ultra 2 Smartphone",
        "category": "Smartphones",
        "price": 79999,
        "description": "Flagship phone with a 200MP camera, 120Hz display, wireless charging and IP68 water resistance.",
    },
    {
        "id": 6,
        "name": "EchoBuds Lite",
        "category": "Audio",
        "price": 1999,
        "description": "True wireless earbuds with 30 hours of total playback and a low-latency gaming mode.",
    },
    {
        "id": 7,
        "name": "EchoMax ANC Headphones",
        "category": "Audio",
        "price": 24990,
        "description": "Over-ear headphones with active noise cancellation, 40-hour battery and multipoint Bluetooth.",
    },
    {
        "id": 8,
        "name": "Stride Run 3 Running Shoes",
        "category": "Footwear",
        "price": 4599,
        "description": "Lightweight cushioned running shoes with a breathable mesh upper for daily training.",
    },
    {
        "id": 9,
        "name": "Trailmaster GTX Hiking Boots",
        "category": "Footwear",
        "price": 8999,
        "description": "Waterproof hiking boots with ankle support and a high-grip rubber outsole.",
    },
    {
        "id": 10,
        "name": "FitTrack 4 Smartwatch",
        "category": "Wearables",
        "price": 6499,
        "description": "Fitness smartwatch with heart-rate and SpO2 tracking, built-in GPS and a 10-day battery.",
    },
    {
        "id": 11,
        "name": "BrewMate Espresso Machine",
        "category": "Kitchen",
        "price": 15990,
        "description": "15-bar espresso machine with a steam wand for lattes and cappuccinos at home.",
    },
    {
        "id": 12,
        "name": "AirPure 300 Air Purifier",
        "category": "Home Appliances",
        "price": 12499,
        "description": "HEPA air purifier for rooms up to 300 sq ft with a real-time AQI display and quiet night mode.",
    },
    {
        "id": 13,
        "name": "ErgoFlex Office Chair",
        "category": "Furniture",
        "price": 11990,
        "description": "Ergonomic mesh office chair with adjustable lumbar support and 3D armrests.",
    },
    {
        "id": 14,
        "name": "Lumen 27 4K Monitor",
        "category": "Monitors",
        "price": 28999,
        "description": "27-inch 4K IPS monitor with 99% sRGB coverage and USB-C power delivery.",
    },
    {
        "id": 15,
        "name": "Canvas Daypack 20L",
        "category": "Bags",
        "price": 1499,
        "description": "Water-resistant 20-litre backpack with a padded 15-inch laptop sleeve.",
    },
]
