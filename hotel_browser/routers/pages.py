"""
HTML pages: landing page and the infinite-scroll hotel listing.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from hotel_browser.config import get_app_settings

router = APIRouter()


STYLE = '''
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background: #f4f6fb; min-height: 100vh; padding: 20px; }
        .container { max-width: 900px; margin: 0 auto; }
        .header { text-align: center; margin: 40px 0; }
        .header h1 { font-size: 2.5rem; margin-bottom: 10px; }
        .btn { background: #3b82f6; color: white; border: none; padding: 10px 24px; border-radius: 8px; font-size: 1rem; font-weight: 600; cursor: pointer; text-decoration: none; }
        .search { display: flex; gap: 12px; flex-wrap: wrap; margin-bottom: 20px; }
        .search input { flex: 1; min-width: 140px; padding: 10px; border: 2px solid #e0e0e0; border-radius: 8px; }
        .card { background: white; border: 1px solid #ccc; border-radius: 8px; padding: 16px; margin-bottom: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.05); }
        .card h2 { font-size: 1.1rem; margin-bottom: 6px; }
        .error { background: #ffebee; color: #c62828; padding: 15px; border-radius: 8px; }
        #sentinel { height: 40px; }
'''


@router.get("/", response_class=HTMLResponse)
async def landing_page():
    """Serve the landing page"""
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Hotel Browser</title>
    <style>{STYLE}</style>
</head>
<body>
    <div class="container">
        <div class="header">
            <h1>Hotel Browser</h1>
            <p>Find a place to stay by name, city and price.</p>
            <p style="margin-top: 30px;"><a class="btn" href="/hotels">Browse hotels</a></p>
        </div>
    </div>
</body>
</html>'''


@router.get("/hotels", response_class=HTMLResponse)
async def hotels_page():
    """Serve the search form and infinite-scroll listing"""
    presenter = get_app_settings().presenter
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Hotels</title>
    <style>{STYLE}</style>
</head>
<body>
    <div class="container">
        <h1 style="text-align: center; margin-bottom: 20px;">Hotels</h1>
        <form id="search" class="search">
            <input type="text" name="hotelName" placeholder="Search by Hotel Name">
            <input type="text" name="hotelCity" placeholder="Search by City">
            <input type="number" name="minPrice" placeholder="Min Price" min="0">
            <input type="number" name="maxPrice" placeholder="Max Price" min="0">
            <button type="submit" class="btn">Search</button>
        </form>
        <div id="status"></div>
        <div id="list"></div>
        <div id="sentinel"></div>
    </div>
    <script>
        const BATCH_SIZE = {presenter.batch_size};
        let results = [];
        let revealed = 0;
        let latestRequest = 0;
        const list = document.getElementById('list');
        const statusEl = document.getElementById('status');
        const sentinel = document.getElementById('sentinel');

        function escapeHtml(text) {{
            const div = document.createElement('div');
            div.textContent = text == null ? '' : String(text);
            return div.innerHTML;
        }}

        function renderHotel(hotel) {{
            const features = [];
            for (let i = 1; i <= 9; i++) {{
                if (hotel['Feature_' + i]) features.push(hotel['Feature_' + i]);
            }}
            return '<div class="card"><h2>' + escapeHtml(hotel.Hotel_Name) + '</h2>' +
                '<p>Rating: ' + escapeHtml(hotel.Hotel_Rating) + '</p>' +
                '<p>City: ' + escapeHtml(hotel.City) + '</p>' +
                '<p>Price: ' + escapeHtml(hotel.Hotel_Price) + '</p>' +
                '<p>Features: ' + escapeHtml(features.join(', ')) + '</p></div>';
        }}

        function revealNext() {{
            if (revealed >= results.length) return;
            const next = Math.min(revealed + BATCH_SIZE, results.length);
            list.insertAdjacentHTML('beforeend', results.slice(revealed, next).map(renderHotel).join(''));
            revealed = next;
            // re-arm so a sentinel that is still visible triggers the next batch
            observer.unobserve(sentinel);
            observer.observe(sentinel);
        }}

        async function search(params) {{
            const requestId = ++latestRequest;
            statusEl.innerHTML = '<p>Loading...</p>';
            list.innerHTML = '';
            results = [];
            revealed = 0;
            try {{
                const query = new URLSearchParams(params).toString();
                const response = await fetch(query ? '/api/fetch-data?' + query : '/api/fetch-data');
                if (!response.ok) throw new Error('Failed to fetch hotel data');
                const data = await response.json();
                if (requestId !== latestRequest) return;
                results = data;
                statusEl.innerHTML = data.length ? '' : '<p>No hotels found.</p>';
                revealNext();
            }} catch (err) {{
                if (requestId !== latestRequest) return;
                statusEl.innerHTML = '<div class="error">Error: ' + escapeHtml(err.message) + '</div>';
            }}
        }}

        document.getElementById('search').addEventListener('submit', function(e) {{
            e.preventDefault();
            const params = {{}};
            new FormData(e.target).forEach(function(value, key) {{
                if (String(value).trim() !== '') params[key] = String(value).trim();
            }});
            search(params);
        }});

        const observer = new IntersectionObserver(function(entries) {{
            if (entries[0].isIntersecting) revealNext();
        }}, {{ threshold: {presenter.visibility_threshold} }});
        observer.observe(sentinel);
        window.addEventListener('pagehide', function() {{ observer.disconnect(); }});

        search({{}});
    </script>
</body>
</html>'''
