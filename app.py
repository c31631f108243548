"""
Paisley Highland Games - development server entry point.
"""
from highlandgames import create_app

app = create_app({'VERIFY_SMTP_ON_START': True})

if __name__ == '__main__':
    port = app.config['PORT']
    print("🚀 Starting Highland Games API...")
    print(f"📍 Access the application at: http://127.0.0.1:{port}")
    print("=" * 60)

    app.run(debug=True, host='0.0.0.0', port=port)
