"""
Quick demo script to run the AI Product Recommender locally.

This script starts a local server and shows the available endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting AI Product Recommender Demo")
    print("=" * 60)
    print()
    print("📌 Endpoints:")
    print("   - Web UI:         GET  http://localhost:8000/")
    print("   - Health Check:   GET  http://localhost:8000/health")
    print("   - Products:       GET  http://localhost:8000/products")
    print("   - Recommend:      POST http://localhost:8000/recommendations/query")
    print("   - Current state:  GET  http://localhost:8000/recommendations/state")
    print("   - API Docs:            http://localhost:8000/docs")
    print()
    print("🔑 Configuration:")
    print("   GOOGLE_API_KEY must be set (environment or .env file)")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/recommendations/query" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"query": "I want a laptop under ₹60,000"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "recommender.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
