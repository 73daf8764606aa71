"""Browser page that renders the day log and charts from the API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/ui", response_class=HTMLResponse)
async def tracker_ui() -> HTMLResponse:
    """Minimal tracker UI that consumes the day log API."""
    return HTMLResponse(_TRACKER_UI_HTML)


_TRACKER_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Calorie Tracker</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem auto; max-width: 640px; }
      .row { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; width: 320px; }
      button { padding: 0.4rem 0.8rem; margin-left: 0.5rem; }
      li { cursor: pointer; margin-bottom: 0.4rem; }
      .items { cursor: default; color: #555; }
    </style>
  </head>
  <body>
    <h1>Calorie Tracker</h1>
    <div class="row">
      <input id="food" type="text" placeholder="Enter food (e.g., 2 eggs and rice)" />
      <button id="add" onclick="addFood()">Add</button>
      <button onclick="clearAll()">Clear all</button>
    </div>
    <div class="row" id="totals"></div>
    <canvas id="line"></canvas>
    <ul id="log"></ul>
    <p id="empty">No data yet. Add some food!</p>
    <script>
      let lineChart = null;
      let pieChart = null;

      async function addFood() {
        const input = document.getElementById('food');
        const button = document.getElementById('add');
        button.disabled = true;
        button.textContent = 'Checking...';
        try {
          const res = await fetch('/days', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ food: input.value })
          });
          if (res.status === 201) {
            input.value = '';
          } else if (res.status !== 204) {
            const data = await res.json();
            alert(data.detail);
          }
        } catch (err) {
          alert('Something went wrong while fetching data.');
        } finally {
          button.disabled = false;
          button.textContent = 'Add';
          await render();
        }
      }

      async function clearAll() {
        const ok = confirm('Clear all logged days? This cannot be undone.');
        await fetch('/days?confirm=' + ok, { method: 'DELETE' });
        await render();
      }

      async function toggle(day) {
        await fetch('/days/' + day + '/toggle', { method: 'POST' });
        await render();
      }

      async function render() {
        const state = await (await fetch('/days')).json();
        const chart = await (await fetch('/chart/calories')).json();
        const t = state.totals;
        document.getElementById('totals').textContent = t.days
          ? `Total: ${t.calories.toFixed(0)} kcal, ${t.protein.toFixed(1)}P / ${t.carbs.toFixed(1)}C / ${t.fat.toFixed(1)}F`
          : '';
        document.getElementById('empty').style.display = state.days.length ? 'none' : 'block';
        if (lineChart) { lineChart.destroy(); }
        lineChart = new Chart(document.getElementById('line'), {
          type: 'line',
          data: {
            labels: chart.labels,
            datasets: [{ label: 'Calories per Day', data: chart.values, tension: 0.3 }]
          }
        });
        const log = document.getElementById('log');
        log.innerHTML = '';
        if (pieChart) { pieChart.destroy(); pieChart = null; }
        for (const record of state.days) {
          const li = document.createElement('li');
          li.innerHTML = `<b>Day ${record.day}:</b> ${record.total.toFixed(0)} kcal`;
          li.onclick = () => toggle(record.day);
          log.appendChild(li);
          if (state.expanded_day === record.day) {
            const details = document.createElement('div');
            details.className = 'items';
            details.onclick = (event) => event.stopPropagation();
            for (const item of record.items) {
              const p = document.createElement('div');
              p.textContent = `${item.serving_qty} ${item.serving_unit} ${item.name}: ${item.calories.toFixed(0)} kcal`;
              details.appendChild(p);
            }
            const canvas = document.createElement('canvas');
            details.appendChild(canvas);
            li.appendChild(details);
            const macros = await (await fetch('/days/' + record.day + '/macros')).json();
            pieChart = new Chart(canvas, {
              type: 'pie',
              data: { labels: macros.labels, datasets: [{ data: macros.values }] }
            });
          }
        }
      }

      render();
    </script>
  </body>
</html>
"""
