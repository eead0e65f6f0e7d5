"""Sleep, readiness and HRV recovery analyses."""
